"""基础管理器类"""

import os

import docker
from docker.client import DockerClient
from docker.errors import DockerException
from loguru import logger

from ..constants import ERROR_MESSAGES, IN_DOCKER_ENV_VAR
from .image.base import EngineConnectionError


def connection_error(error: Exception) -> EngineConnectionError:
    """
    根据运行环境生成Docker连接错误

    在容器内运行（设置了IN_DOCKER环境变量）时提示挂载docker.sock。

    Args:
        error: 原始异常

    Returns:
        EngineConnectionError: 带有提示信息的连接错误
    """
    if os.environ.get(IN_DOCKER_ENV_VAR):
        return EngineConnectionError(ERROR_MESSAGES["docker_socket"])
    return EngineConnectionError(ERROR_MESSAGES["docker_connection"].format(error))


class BaseManager:
    """需要访问Docker守护进程的管理器基类"""

    docker_client: DockerClient

    def __init__(self) -> None:
        """初始化Docker客户端"""
        try:
            self.docker_client = docker.from_env()
            logger.debug("Docker客户端初始化成功")
        except DockerException as e:
            logger.debug(f"Docker客户端初始化失败: {e}")
            raise connection_error(e) from e

