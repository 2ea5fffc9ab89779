"""Docker镜像层级可视化工具包"""

__version__ = "0.1.0"

# 配置loguru，日志输出到标准错误
from .cli_utils import configure_logging

configure_logging()

# 导入其他模块
from .cli import app, main

__all__ = [
    "app",
    "main",
    "__version__",
]
