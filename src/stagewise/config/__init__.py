"""Configuration loading, schema, and defaults."""

from stagewise.config.loader import ConfigError, load_config
from stagewise.config.schema import OutputConfig, StagewiseConfig, StatusConfig

__all__ = [
    "ConfigError",
    "OutputConfig",
    "StagewiseConfig",
    "StatusConfig",
    "load_config",
]
