"""Configuration loading, schema, and defaults."""

from gitporcelain.config.loader import ConfigError, load_config
from gitporcelain.config.schema import GitPorcelainConfig, OutputConfig, ParseConfig

__all__ = [
    "ConfigError",
    "GitPorcelainConfig",
    "OutputConfig",
    "ParseConfig",
    "load_config",
]
