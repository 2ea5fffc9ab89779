"""镜像层级结构构建"""

from typing import Dict, Iterator, List, Optional, Sequence

from .base import ImageNode


def group_by_parent(nodes: Sequence[ImageNode]) -> Dict[str, List[ImageNode]]:
    """
    按父镜像ID分组

    Args:
        nodes: 镜像列表

    Returns:
        Dict[str, List[ImageNode]]: 父镜像ID -> 子镜像列表（保持输入顺序）
    """
    by_parent: Dict[str, List[ImageNode]] = {}
    for node in nodes:
        by_parent.setdefault(node.parent_id, []).append(node)
    return by_parent


def collect_roots(nodes: Sequence[ImageNode]) -> List[ImageNode]:
    """返回所有没有父镜像的镜像（保持输入顺序）"""
    return [node for node in nodes if node.is_root]


class Forest:
    """镜像森林

    节点按输入顺序存放在数组中，用整数句柄索引；
    children 保存父句柄到子句柄列表的邻接关系。
    父镜像ID找不到对应节点的镜像（孤儿）与根镜像一样放在 roots 中。
    指定 start_id 时，roots 只包含该镜像。
    """

    def __init__(self, nodes: Sequence[ImageNode], start_id: Optional[str] = None) -> None:
        self.nodes: List[ImageNode] = list(nodes)
        self.start_id = start_id
        self.handles: Dict[str, int] = {}
        self.parents: List[Optional[int]] = []
        self.children: List[List[int]] = [[] for _ in self.nodes]
        self.roots: List[int] = []

        for handle, node in enumerate(self.nodes):
            # ID重复时以第一次出现的为准
            self.handles.setdefault(node.id, handle)

        for handle, node in enumerate(self.nodes):
            parent = self.handles.get(node.parent_id) if node.parent_id else None
            self.parents.append(parent)
            if parent is None:
                self.roots.append(handle)
            else:
                self.children[parent].append(handle)

        if start_id is not None:
            self.roots = [self.handles[start_id]]

    def __len__(self) -> int:
        return len(self.nodes)

    def node(self, handle: int) -> ImageNode:
        return self.nodes[handle]

    def child_count(self, handle: int) -> int:
        return len(self.children[handle])

    def walk(self) -> Iterator[int]:
        """按渲染顺序（深度优先、输入顺序）遍历所有可达节点"""
        stack = list(reversed(self.roots))
        while stack:
            handle = stack.pop()
            yield handle
            stack.extend(reversed(self.children[handle]))

    @classmethod
    def rooted_at(cls, nodes: Sequence[ImageNode], start: ImageNode) -> "Forest":
        """
        以指定镜像为唯一根构建森林

        Args:
            nodes: 全部镜像
            start: 起始镜像，其 parent_id 已被置空

        Returns:
            Forest: 只以起始镜像为根的森林
        """
        replaced = [start if node.id == start.id else node for node in nodes]
        return cls(replaced, start_id=start.id)
