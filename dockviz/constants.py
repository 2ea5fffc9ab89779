"""常量配置模块"""

from typing import Dict, List, TypedDict

# 镜像相关
NONE_TAG: str = "<none>:<none>"
DEFAULT_TAG: str = "latest"
TRUNCATE_LENGTH: int = 12
DIGEST_PREFIX: str = "sha256:"

# 大小单位（以1000为基数）
SIZE_UNITS: List[str] = ["B", "KB", "MB", "GB", "TB"]
SIZE_BASE: int = 1000

# 配置文件相关
CONFIG_FILE_NAME: str = ".dockviz.json"
CONFIG_ENV_VAR: str = "DOCKVIZ_CONFIG"
IN_DOCKER_ENV_VAR: str = "IN_DOCKER"


# 渲染选项
class RenderOptions(TypedDict, total=False):
    tree: bool
    dot: bool
    short: bool
    no_trunc: bool
    incremental: bool
    only_labelled: bool


# 项目默认配置
class ImagesConfig(TypedDict):
    no_trunc: bool
    incremental: bool
    only_labelled: bool


class DefaultConfig(TypedDict):
    images: ImagesConfig
    log_level: str


DEFAULT_CONFIG: DefaultConfig = {
    "images": {
        "no_trunc": False,
        "incremental": False,
        "only_labelled": False,
    },
    "log_level": "WARNING",
}

LOG_LEVELS: List[str] = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


# 错误消息
class ErrorMessages(TypedDict):
    no_output_mode: str
    image_not_found: str
    read_input: str
    parse_input: str
    invalid_record: str
    docker_connection: str
    docker_socket: str
    config_invalid: str


ERROR_MESSAGES: ErrorMessages = {
    "no_output_mode": "Please specify either --dot, --tree, or --short",
    "image_not_found": "Unable to find image {} = {}.",
    "read_input": "Error reading input: {}",
    "parse_input": "Error reading JSON: {}",
    "invalid_record": "Invalid image record at index {}: {}",
    "docker_connection": "Unable to connect: {}\nFor help, run 'dockviz --help'",
    "docker_socket": (
        "Unable to access Docker socket, please run like this:\n"
        "  docker run --rm -v /var/run/docker.sock:/var/run/docker.sock nate/dockviz images <args>\n"
        "For more help, run 'dockviz --help'"
    ),
    "config_invalid": "配置验证失败: {}",
}

# Graphviz样式
DOT_LABEL_STYLE: Dict[str, str] = {
    "shape": "box",
    "fillcolor": '"paleturquoise"',
    "style": '"filled,rounded"',
}
