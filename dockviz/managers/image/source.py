"""镜像列表获取：Docker守护进程或JSON输入"""

import json
from typing import IO, Any, List, Union

from docker.errors import DockerException
from loguru import logger

from ...constants import ERROR_MESSAGES
from ..base_manager import BaseManager, connection_error
from .base import ImageNode, InputParseError, InputReadError


def nodes_from_records(records: Any) -> List[ImageNode]:
    """
    将字典列表转换为镜像记录

    Args:
        records: 反序列化后的数据，应为字典列表

    Returns:
        List[ImageNode]: 镜像记录列表

    Raises:
        InputParseError: 数据结构不符合要求时抛出
    """
    if not isinstance(records, list):
        raise InputParseError(ERROR_MESSAGES["parse_input"].format("expected a JSON array"))

    nodes = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise InputParseError(ERROR_MESSAGES["invalid_record"].format(index, "expected an object"))
        try:
            nodes.append(ImageNode.from_dict(record))
        except KeyError as e:
            raise InputParseError(ERROR_MESSAGES["invalid_record"].format(index, f"missing field {e}")) from e
        except (TypeError, ValueError) as e:
            raise InputParseError(ERROR_MESSAGES["invalid_record"].format(index, e)) from e
    return nodes


def parse_images_json(raw: Union[str, bytes]) -> List[ImageNode]:
    """
    解析JSON格式的镜像列表

    Args:
        raw: JSON文本

    Returns:
        List[ImageNode]: 镜像记录列表

    Raises:
        InputParseError: JSON格式错误时抛出
    """
    try:
        records = json.loads(raw)
    except ValueError as e:
        raise InputParseError(ERROR_MESSAGES["parse_input"].format(e)) from e
    return nodes_from_records(records)


def read_images_stream(stream: IO) -> List[ImageNode]:
    """
    从文件或标准输入读取并解析镜像列表

    Raises:
        InputReadError: 读取失败时抛出
        InputParseError: JSON格式错误时抛出
    """
    try:
        raw = stream.read()
    except OSError as e:
        raise InputReadError(ERROR_MESSAGES["read_input"].format(e)) from e
    nodes = parse_images_json(raw)
    logger.debug(f"从输入读取了 {len(nodes)} 个镜像")
    return nodes


class EngineImageSource(BaseManager):
    """从Docker守护进程获取镜像列表"""

    def list_images(self) -> List[ImageNode]:
        """
        获取所有镜像（包括中间层镜像）

        Returns:
            List[ImageNode]: 镜像记录列表

        Raises:
            EngineConnectionError: 无法访问Docker守护进程时抛出
        """
        try:
            records = self.docker_client.api.images(all=True)
        except DockerException as e:
            raise connection_error(e) from e
        finally:
            self.docker_client.close()

        nodes = nodes_from_records(records)
        logger.debug(f"从Docker守护进程获取了 {len(nodes)} 个镜像")
        return nodes
