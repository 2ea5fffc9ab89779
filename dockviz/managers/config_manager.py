"""配置管理器类"""

import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Type, Union, cast

from loguru import logger

from ..constants import (
    CONFIG_ENV_VAR,
    CONFIG_FILE_NAME,
    DEFAULT_CONFIG,
    ERROR_MESSAGES,
    LOG_LEVELS,
    DefaultConfig,
    RenderOptions,
)
from .image.base import DockvizError


class ConfigError(DockvizError):
    """配置错误"""

    pass


ValidationStructure = Dict[str, Union[Type[Any], 'ValidationStructure']]

def generate_validation_structure(config_template: Dict[str, Any]) -> ValidationStructure:
    """
    从配置模板生成验证结构

    Args:
        config_template: 配置模板

    Returns:
        ValidationStructure: 验证结构
    """
    validation_structure: ValidationStructure = {}

    for key, value in config_template.items():
        if isinstance(value, dict):
            validation_structure[key] = generate_validation_structure(value)
        elif isinstance(value, list):
            validation_structure[key] = list
        elif value is None:
            validation_structure[key] = str
        else:
            validation_structure[key] = type(value)

    return validation_structure


def find_config_file(start_dir: Optional[str] = None) -> Optional[Path]:
    """
    查找配置文件

    优先使用 DOCKVIZ_CONFIG 环境变量指定的路径，
    否则从起始目录开始向上查找 .dockviz.json。

    Args:
        start_dir: 起始目录，默认为当前目录

    Returns:
        Optional[Path]: 配置文件路径，未找到时返回None
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    current = Path(start_dir or os.getcwd()).resolve()
    while True:
        candidate = current / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
        if current == current.parent:
            return None
        current = current.parent


class ConfigManager:
    """配置管理器类，加载并验证可选的配置文件"""

    config: DefaultConfig
    REQUIRED_CONFIG_FIELDS: ValidationStructure

    def __init__(self, config_file: Optional[Path] = None) -> None:
        """
        初始化配置管理器

        Args:
            config_file: 配置文件路径，默认自动查找
        """
        self.config_file = config_file
        self.config = cast(DefaultConfig, copy.deepcopy(DEFAULT_CONFIG))

        # 初始化验证结构
        self.REQUIRED_CONFIG_FIELDS = generate_validation_structure(cast(Dict[str, Any], DEFAULT_CONFIG))

    def load_config(self) -> DefaultConfig:
        """
        加载配置文件并合并到默认配置

        配置文件不存在时直接返回默认配置。

        Returns:
            DefaultConfig: 合并后的配置

        Raises:
            ConfigError: 配置文件读取或验证失败时抛出
        """
        config_file = self.config_file or find_config_file()
        if config_file is None:
            logger.debug("未找到配置文件，使用默认配置")
            return self.config

        try:
            with open(config_file, "r", encoding="utf-8") as f:
                user_config = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigError(f"加载配置文件失败: {config_file}: {e}") from e

        if not isinstance(user_config, dict):
            raise ConfigError(ERROR_MESSAGES["config_invalid"].format("配置文件应为JSON对象"))

        logger.debug(f"加载配置文件: {config_file}")
        self.update_config(user_config)
        return self.config

    def update_config(self, config_updates: Dict[str, Any]) -> DefaultConfig:
        """
        更新配置

        Args:
            config_updates: 要更新的配置项

        Returns:
            DefaultConfig: 更新后的配置

        Raises:
            ConfigError: 配置验证失败时抛出
        """

        # 递归更新配置
        def recursive_update(current, updates):
            for key, value in updates.items():
                if key in current and isinstance(value, dict) and isinstance(current[key], dict):
                    recursive_update(current[key], value)
                else:
                    current[key] = value

        recursive_update(self.config, config_updates)

        self.validate_config()
        return self.config

    def validate_config(self) -> None:
        """
        验证配置的完整性和正确性

        Raises:
            ConfigError: 配置验证失败时抛出
        """
        self._validate_config_structure(cast(Dict[str, Any], self.config), self.REQUIRED_CONFIG_FIELDS)

        level = self.config["log_level"].upper()
        if level not in LOG_LEVELS:
            raise ConfigError(ERROR_MESSAGES["config_invalid"].format(f"未知的日志级别: {level}"))
        self.config["log_level"] = level

    def _validate_config_structure(self, config: Dict[str, Any], required: ValidationStructure) -> None:
        """
        递归验证配置结构

        Args:
            config: 要验证的配置
            required: 必需的配置结构

        Raises:
            ConfigError: 配置结构验证失败时抛出
        """
        for key, value_type in required.items():
            if key not in config:
                raise ConfigError(ERROR_MESSAGES["config_invalid"].format(f"缺少必需的配置项: {key}"))

            if isinstance(value_type, dict):
                if not isinstance(config[key], dict):
                    raise ConfigError(ERROR_MESSAGES["config_invalid"].format(f"配置项类型错误: {key} 应为字典"))
                self._validate_config_structure(config[key], value_type)
            elif not isinstance(config[key], value_type):
                raise ConfigError(
                    ERROR_MESSAGES["config_invalid"].format(f"配置项类型错误: {key} 应为 {value_type.__name__}")
                )

    def render_options(self, **flags: bool) -> RenderOptions:
        """
        合并配置默认值和命令行参数

        命令行布尔参数只能打开选项，不能关闭配置中已打开的选项。

        Args:
            **flags: 命令行参数（tree、dot、short、no_trunc、incremental、only_labelled）

        Returns:
            RenderOptions: 渲染选项
        """
        options: Dict[str, bool] = dict(self.config["images"])
        for key, value in flags.items():
            options[key] = bool(value) or options.get(key, False)
        return cast(RenderOptions, options)

