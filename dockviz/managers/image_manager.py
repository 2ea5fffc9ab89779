"""镜像管理器类 - 门面模式实现"""

from typing import List, Optional, Sequence

from loguru import logger

from ..constants import ERROR_MESSAGES, RenderOptions
from ..formatters import format_dot, format_short, format_tree
from .image.base import ImageNode, RenderUsageError
from .image.collapse import collapse
from .image.hierarchy import Forest
from .image.resolve import resolve_start_image


class ImageManager:
    """镜像管理器类，把镜像列表渲染为文本树、Graphviz或标签摘要"""

    def __init__(self, nodes: Sequence[ImageNode]) -> None:
        """
        初始化镜像管理器

        Args:
            nodes: 镜像列表
        """
        self.nodes: List[ImageNode] = list(nodes)

    def build_forest(self, start: Optional[str] = None, only_labelled: bool = False) -> Forest:
        """
        构建镜像森林

        Args:
            start: 起始镜像ID或名称，为空时使用所有根镜像
            only_labelled: 是否折叠无标签的中间镜像

        Returns:
            Forest: 镜像森林

        Raises:
            ImageNotFoundError: 找不到起始镜像时抛出
        """
        if start:
            forest = Forest.rooted_at(self.nodes, resolve_start_image(start, self.nodes))
        else:
            forest = Forest(self.nodes)
        logger.debug(f"共 {len(forest)} 个镜像，{len(forest.roots)} 个根镜像")

        if only_labelled:
            forest = collapse(forest)
        return forest

    def render(self, start: Optional[str] = None, options: Optional[RenderOptions] = None) -> str:
        """
        渲染镜像列表

        Args:
            start: 起始镜像ID或名称（只对 tree 和 dot 生效）
            options: 渲染选项

        Returns:
            str: 完整的输出文本

        Raises:
            RenderUsageError: 未指定 tree、dot 或 short 时抛出
            ImageNotFoundError: 找不到起始镜像时抛出
        """
        options = options or {}

        if options.get("tree") or options.get("dot"):
            forest = self.build_forest(start, options.get("only_labelled", False))
            output = ""
            if options.get("tree"):
                output += format_tree(
                    forest,
                    no_trunc=options.get("no_trunc", False),
                    incremental=options.get("incremental", False),
                )
            if options.get("dot"):
                output += format_dot(forest)
            return output

        if options.get("short"):
            return format_short(self.nodes)

        raise RenderUsageError(ERROR_MESSAGES["no_output_mode"])


def render_images(
    nodes: Sequence[ImageNode], start: Optional[str] = None, options: Optional[RenderOptions] = None
) -> str:
    """渲染镜像列表，参见 ImageManager.render"""
    return ImageManager(nodes).render(start, options)
