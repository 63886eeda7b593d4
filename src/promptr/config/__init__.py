"""Configuration loading and models."""

from promptr.exceptions import ConfigError, ConfigLoadError, ConfigValidationError

from ._defaults import CONFIG_FILE_NAME, CONFIG_MAGIC, DEFAULT_CONFIG
from ._discovery import get_config_dir, get_config_path
from ._load import default_config, safe_load_config
from ._models import LogFormat, LoggingConfig, LogLevel, PromptrConfig, SegmentConfig

__all__ = [
    "CONFIG_FILE_NAME",
    "CONFIG_MAGIC",
    "DEFAULT_CONFIG",
    "ConfigError",
    "ConfigLoadError",
    "ConfigValidationError",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "PromptrConfig",
    "SegmentConfig",
    "default_config",
    "get_config_dir",
    "get_config_path",
    "safe_load_config",
]
