"""Graphviz格式化模块"""

from typing import List

from ..constants import DOT_LABEL_STYLE
from ..managers.image.hierarchy import Forest
from ..utils import truncate_id

DOT_HEADER = "digraph docker {\n"
DOT_FOOTER = " base [style=invisible]\n}\n"


def format_dot(forest: Forest) -> str:
    """格式化镜像森林为Graphviz digraph

    根镜像通过不可见的边挂在 base 节点下，带标签的镜像额外输出方框节点。
    镜像ID总是截断为12个字符。

    Args:
        forest: 镜像森林

    Returns:
        str: 完整的 digraph 文本
    """
    lines: List[str] = [DOT_HEADER]
    roots = set(forest.roots)
    for handle in forest.walk():
        node = forest.node(handle)
        image_id = truncate_id(node.id)

        if handle in roots:
            lines.append(f' base -> "{image_id}" [style=invis]\n')
        else:
            lines.append(f' "{truncate_id(node.parent_id)}" -> "{image_id}"\n')

        if node.has_real_tag:
            lines.append(_format_label(image_id, node.repo_tags))
    lines.append(DOT_FOOTER)
    return "".join(lines)


def _format_label(image_id: str, repo_tags) -> str:
    label = "\\n".join((image_id,) + tuple(repo_tags))
    style = ",".join(f"{key}={value}" for key, value in DOT_LABEL_STYLE.items())
    return f' "{image_id}" [label="{label}",{style}];\n'
