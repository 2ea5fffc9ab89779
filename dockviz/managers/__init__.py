"""管理器模块

该模块包含镜像列表获取、渲染和配置相关的管理器类。
"""

from .base_manager import BaseManager
from .config_manager import ConfigError, ConfigManager
from .image_manager import ImageManager, render_images

__all__ = [
    "BaseManager",
    "ConfigManager",
    "ConfigError",
    "ImageManager",
    "render_images",
]
