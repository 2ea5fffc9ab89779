"""仓库标签摘要格式化模块"""

from typing import Dict, List, Sequence

from ..constants import NONE_TAG
from ..managers.image.base import ImageNode
from ..utils import split_repo_tag


def group_tags_by_repo(nodes: Sequence[ImageNode]) -> Dict[str, List[str]]:
    """
    按仓库分组所有真实标签

    Args:
        nodes: 镜像列表

    Returns:
        Dict[str, List[str]]: 仓库名 -> 标签列表（保持出现顺序）
    """
    by_repo: Dict[str, List[str]] = {}
    for node in nodes:
        for repo_tag in node.repo_tags:
            if repo_tag == NONE_TAG:
                continue
            repository, tag = split_repo_tag(repo_tag)
            by_repo.setdefault(repository, []).append(tag)
    return by_repo


def format_short(nodes: Sequence[ImageNode]) -> str:
    """格式化为每个仓库一行的标签摘要，仓库按名称排序"""
    by_repo = group_tags_by_repo(nodes)
    return "".join(f"{repo}: {', '.join(by_repo[repo])}\n" for repo in sorted(by_repo))
