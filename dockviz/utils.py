"""工具函数模块"""

from typing import Tuple

from .constants import DIGEST_PREFIX, SIZE_BASE, SIZE_UNITS, TRUNCATE_LENGTH


def human_size(raw: int) -> str:
    """
    将字节数转换为易读的大小字符串（以1000为基数）

    Args:
        raw: 字节数

    Returns:
        str: 例如 "1.5 KB"
    """
    value = float(raw)
    index = 0
    # 超过TB时不再进位
    while value >= SIZE_BASE and index < len(SIZE_UNITS) - 1:
        value = value / SIZE_BASE
        index += 1
    return f"{value:.1f} {SIZE_UNITS[index]}"


def truncate_id(image_id: str) -> str:
    """返回镜像ID的前12个字符"""
    return image_id[:TRUNCATE_LENGTH]


def strip_digest_prefix(image_id: str) -> str:
    """去掉镜像ID中的 sha256: 前缀"""
    if image_id.startswith(DIGEST_PREFIX):
        return image_id[len(DIGEST_PREFIX):]
    return image_id


def split_repo_tag(repo_tag: str) -> Tuple[str, str]:
    """
    解析 "仓库名:标签"，标签位于最后一个冒号之后

    仓库名本身可能包含端口号（例如 localhost:5000/app:v1），
    所以按最后一个冒号拆分。

    Args:
        repo_tag: 完整标签

    Returns:
        Tuple[str, str]: 仓库名和标签
    """
    repository, separator, tag = repo_tag.rpartition(":")
    if not separator:
        return repo_tag, ""
    return repository, tag
