"""文本树格式化模块"""

from typing import List

from ..managers.image.hierarchy import Forest
from ..utils import human_size, truncate_id

BRANCH = "├─"
LAST_BRANCH = "└─"
PIPE = "│ "
SPACE = "  "


def format_tree(forest: Forest, no_trunc: bool = False, incremental: bool = False) -> str:
    """格式化镜像森林为文本树

    Args:
        forest: 镜像森林
        no_trunc: 是否显示完整镜像ID
        incremental: 是否显示增量大小而不是累计大小

    Returns:
        str: 每个镜像一行的文本树
    """
    lines: List[str] = []
    _format_siblings(lines, forest, forest.roots, no_trunc, incremental, "")
    return "".join(lines)


def _format_siblings(
    lines: List[str],
    forest: Forest,
    handles: List[int],
    no_trunc: bool,
    incremental: bool,
    prefix: str,
) -> None:
    """格式化一组兄弟镜像及其子树"""
    last = len(handles) - 1
    for index, handle in enumerate(handles):
        if index == last:
            connector, continuation = LAST_BRANCH, SPACE
        else:
            connector, continuation = BRANCH, PIPE
        lines.append(_format_node(forest, handle, no_trunc, incremental, prefix + connector))

        children = forest.children[handle]
        if children:
            _format_siblings(lines, forest, children, no_trunc, incremental, prefix + continuation)


def _format_node(forest: Forest, handle: int, no_trunc: bool, incremental: bool, prefix: str) -> str:
    """格式化单个镜像行"""
    node = forest.node(handle)
    image_id = node.id if no_trunc else truncate_id(node.id)
    size = node.size if incremental else node.virtual_size

    line = f"{prefix}{image_id} Virtual Size: {human_size(size)}"
    if node.has_real_tag:
        line += f" Tags: {', '.join(node.repo_tags)}"
    return line + "\n"
