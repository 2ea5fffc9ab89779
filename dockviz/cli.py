"""CLI命令行接口模块"""

from pathlib import Path
from typing import Optional

import typer
from loguru import logger

from dockviz import __version__
from dockviz.cli_utils import configure_logging, exit_on_error, load_images
from dockviz.constants import ERROR_MESSAGES
from dockviz.managers.config_manager import ConfigManager
from dockviz.managers.image.base import RenderUsageError
from dockviz.managers.image_manager import ImageManager

# 创建CLI应用
app = typer.Typer(
    help="Visualize docker images.",
    no_args_is_help=True,
    add_completion=False,
)


@app.command("images")
@exit_on_error
def show_images(
    start: Optional[str] = typer.Argument(None, help="Start image id or name (only for --tree and --dot)"),
    dot: bool = typer.Option(False, "-d", "--dot", help="Show image information as Graphviz dot."),
    tree: bool = typer.Option(False, "-t", "--tree", help="Show image information as tree."),
    short: bool = typer.Option(False, "-s", "--short", help="Show short summary of images (repo name and list of tags)."),
    no_trunc: bool = typer.Option(False, "-n", "--no-trunc", help="Don't truncate the image IDs."),
    incremental: bool = typer.Option(
        False, "-i", "--incremental", help="Display image size as incremental rather than cumulative."
    ),
    only_labelled: bool = typer.Option(False, "-l", "--only-labelled", help="Print only labelled images."),
    input_file: Optional[Path] = typer.Option(
        None, "-f", "--file", help="Read the image list as JSON from a file ('-' for stdin)."
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging."),
):
    """Visualize docker images."""
    config_manager = ConfigManager()
    config = config_manager.load_config()
    configure_logging("DEBUG" if verbose else config["log_level"])

    options = config_manager.render_options(
        tree=tree,
        dot=dot,
        short=short,
        no_trunc=no_trunc,
        incremental=incremental,
        only_labelled=only_labelled,
    )
    # 先检查输出格式，避免无意义地连接Docker
    if not (options.get("tree") or options.get("dot") or options.get("short")):
        raise RenderUsageError(ERROR_MESSAGES["no_output_mode"])

    images = load_images(input_file)
    output = ImageManager(images).render(start, options)
    logger.debug(f"输出 {len(output)} 个字符")
    typer.echo(output, nl=False)


@app.command("version")
def show_version():
    """Show the dockviz version."""
    typer.echo(__version__)


def main():
    """主入口函数"""
    app()


if __name__ == "__main__":
    main()
