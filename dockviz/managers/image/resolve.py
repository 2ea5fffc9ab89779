"""起始镜像查找"""

from typing import Sequence

from loguru import logger

from ...constants import DEFAULT_TAG, ERROR_MESSAGES
from ...utils import strip_digest_prefix
from .base import ImageNode, ImageNotFoundError


def resolve_start_image(query: str, nodes: Sequence[ImageNode]) -> ImageNode:
    """
    根据镜像ID前缀或镜像名查找起始镜像

    按输入顺序逐个检查，先匹配ID前缀，再匹配标签；
    名称中没有冒号时按 :latest 标签查找。

    Args:
        query: 镜像ID（可为短ID）或 "仓库名[:标签]"
        nodes: 镜像列表

    Returns:
        ImageNode: 匹配到的镜像，parent_id 已置空，作为新的根

    Raises:
        ImageNotFoundError: 没有镜像匹配时抛出
    """
    repo_tag = query if ":" in query else f"{query}:{DEFAULT_TAG}"
    # 存储的镜像ID已去掉 sha256: 前缀
    id_query = strip_digest_prefix(query)

    for node in nodes:
        if node.id.startswith(id_query) or repo_tag in node.repo_tags:
            logger.debug(f"起始镜像: {node.id}")
            return node._replace(parent_id="")

    raise ImageNotFoundError(ERROR_MESSAGES["image_not_found"].format(query, repo_tag))
