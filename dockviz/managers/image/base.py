"""镜像可视化基础类型定义"""

from typing import Any, Dict, NamedTuple, Tuple

from ...constants import NONE_TAG
from ...utils import strip_digest_prefix


class DockvizError(Exception):
    """所有可视化错误的基类"""
    pass


class InputReadError(DockvizError):
    """读取输入失败"""
    pass


class InputParseError(DockvizError):
    """输入的JSON格式错误"""
    pass


class EngineConnectionError(DockvizError):
    """无法连接到Docker守护进程"""
    pass


class ImageNotFoundError(DockvizError):
    """找不到起始镜像"""
    pass


class RenderUsageError(DockvizError):
    """未指定输出格式"""
    pass


class ImageNode(NamedTuple):
    """镜像记录，构建后只读"""

    id: str
    parent_id: str = ""
    repo_tags: Tuple[str, ...] = ()
    virtual_size: int = 0
    size: int = 0
    created: int = 0

    @property
    def is_root(self) -> bool:
        return not self.parent_id

    @property
    def has_real_tag(self) -> bool:
        """是否带有真实标签（空标签列表和 <none>:<none> 都视为无标签）"""
        if not self.repo_tags:
            return False
        return self.repo_tags[0] != NONE_TAG

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "ImageNode":
        """
        从Docker API或JSON输入的字典构建镜像记录

        Args:
            raw: 包含 Id、ParentId、RepoTags、VirtualSize、Size、Created 的字典

        Returns:
            ImageNode: 镜像记录

        Raises:
            KeyError: 缺少 Id 字段时抛出
            TypeError: 字段类型不正确时抛出
        """
        image_id = raw["Id"]
        parent_id = raw.get("ParentId") or ""
        repo_tags = raw.get("RepoTags") or []

        if not isinstance(image_id, str):
            raise TypeError(f"Id should be a string, got {type(image_id).__name__}")
        if not isinstance(parent_id, str):
            raise TypeError(f"ParentId should be a string, got {type(parent_id).__name__}")
        if not isinstance(repo_tags, list) or not all(isinstance(tag, str) for tag in repo_tags):
            raise TypeError("RepoTags should be a list of strings")

        size = int(raw.get("Size") or 0)
        virtual_size = raw.get("VirtualSize")
        # 新版Docker API不再返回VirtualSize
        if virtual_size is None:
            virtual_size = size

        return cls(
            id=strip_digest_prefix(image_id),
            parent_id=strip_digest_prefix(parent_id),
            repo_tags=tuple(repo_tags),
            virtual_size=int(virtual_size),
            size=size,
            created=int(raw.get("Created") or 0),
        )
