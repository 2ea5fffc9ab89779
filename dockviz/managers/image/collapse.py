"""折叠无标签的中间镜像"""

from typing import Dict, List, Optional

from loguru import logger

from .base import ImageNode
from .hierarchy import Forest


def is_visible(forest: Forest, handle: int) -> bool:
    """
    判断镜像在折叠后是否保留

    满足任一条件即保留：
      1. 带有真实标签
      2. 是根镜像
      3. 有多个子镜像（分支点）
    """
    node = forest.node(handle)
    return node.has_real_tag or node.is_root or forest.child_count(handle) > 1


def collapse(forest: Forest) -> Forest:
    """
    移除无标签、非根、只有一个子镜像的中间镜像，并把子镜像重新挂到最近的可见祖先上

    Args:
        forest: 原始森林

    Returns:
        Forest: 折叠后的新森林，原森林不变
    """
    visible = [is_visible(forest, handle) for handle in range(len(forest))]
    # 每个节点最近的可见祖先的ID，带路径压缩
    anchors: Dict[int, str] = {}

    def anchor_of(handle: int) -> str:
        path: List[int] = []
        seen = set()
        current: Optional[int] = handle
        parent_id = forest.node(handle).parent_id
        while current is not None and current not in anchors and current not in seen:
            seen.add(current)
            path.append(current)
            parent = forest.parents[current]
            if parent is None or visible[parent]:
                # 找不到父镜像时保留原来的父ID
                parent_id = forest.node(current).parent_id
                current = None
            else:
                current = parent
        if current is not None and current in anchors:
            parent_id = anchors[current]
        for step in path:
            anchors[step] = parent_id
        return parent_id

    kept: List[ImageNode] = []
    for handle, node in enumerate(forest.nodes):
        if not visible[handle]:
            continue
        parent_id = anchor_of(handle)
        kept.append(node if parent_id == node.parent_id else node._replace(parent_id=parent_id))

    logger.debug(f"折叠移除了 {len(forest) - len(kept)} 个无标签镜像")
    return Forest(kept, start_id=forest.start_id)
