"""CLI工具模块，包含CLI命令行接口的辅助函数"""

import sys
from functools import wraps
from pathlib import Path
from typing import IO, Any, Callable, List, Optional, TypeVar, cast

import click
from loguru import logger

from .constants import ERROR_MESSAGES
from .managers.image.base import DockvizError, ImageNode, InputReadError
from .managers.image.source import EngineImageSource, read_images_stream

F = TypeVar('F', bound=Callable[..., Any])

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str = "WARNING") -> None:
    """
    配置loguru日志输出到标准错误

    标准输出只用于渲染结果，方便通过管道传给 dot 等工具。

    Args:
        level: 日志级别
    """
    logger.remove()
    logger.add(sink=sys.stderr, format=LOG_FORMAT, colorize=True, level=level)


def stdin_is_piped(stream: Optional[IO] = None) -> bool:
    """判断标准输入是否来自管道或文件而不是终端"""
    stream = stream or click.open_file("-", "r")
    try:
        return not stream.isatty()
    except (AttributeError, ValueError):
        return False


def load_images(input_file: Optional[Path] = None) -> List[ImageNode]:
    """
    获取镜像列表

    指定文件时从文件读取（"-" 表示标准输入）；
    否则标准输入不是终端时读取标准输入；
    其余情况查询Docker守护进程。

    Args:
        input_file: JSON输入文件路径

    Returns:
        List[ImageNode]: 镜像列表

    Raises:
        InputReadError: 读取输入失败时抛出
        InputParseError: JSON格式错误时抛出
        EngineConnectionError: 无法连接Docker时抛出
    """
    if input_file is not None and str(input_file) != "-":
        logger.debug(f"从文件读取镜像列表: {input_file}")
        try:
            with open(input_file, "r", encoding="utf-8") as f:
                return read_images_stream(f)
        except OSError as e:
            raise InputReadError(ERROR_MESSAGES["read_input"].format(e)) from e

    stdin = click.open_file("-", "r")
    if input_file is not None or stdin_is_piped(stdin):
        logger.debug("从标准输入读取镜像列表")
        return read_images_stream(stdin)

    logger.debug("从Docker守护进程获取镜像列表")
    return EngineImageSource().list_images()


def exit_on_error(func: F) -> F:
    """
    捕获可视化错误、记录日志并以状态码1退出的装饰器

    Args:
        func: 被装饰的函数

    Returns:
        Callable: 装饰后的函数
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except DockvizError as e:
            logger.error(str(e))
            sys.exit(1)

    return cast(F, wrapper)
