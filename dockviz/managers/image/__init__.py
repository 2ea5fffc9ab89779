"""镜像层级相关功能模块

该子包包含镜像记录、层级构建、起始镜像查找和折叠等功能模块。
"""

from .base import (
    DockvizError,
    EngineConnectionError,
    ImageNode,
    ImageNotFoundError,
    InputParseError,
    InputReadError,
    RenderUsageError,
)
from .collapse import collapse, is_visible
from .hierarchy import Forest, collect_roots, group_by_parent
from .resolve import resolve_start_image

__all__ = [
    "DockvizError",
    "EngineConnectionError",
    "ImageNode",
    "ImageNotFoundError",
    "InputParseError",
    "InputReadError",
    "RenderUsageError",
    "Forest",
    "collapse",
    "is_visible",
    "collect_roots",
    "group_by_parent",
    "resolve_start_image",
]
