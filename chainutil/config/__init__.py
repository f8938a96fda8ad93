"""
Runtime Configuration Module

Provides configuration loading and management for chainutil.
"""

from .runtime import (
    ENV_PREFIX,
    LoggingConfig,
    RuntimeConfig,
    StorageConfig,
    get_default_config,
    get_default_config_template,
    set_default_config,
)

__all__ = [
    "ENV_PREFIX",
    "LoggingConfig",
    "RuntimeConfig",
    "StorageConfig",
    "get_default_config",
    "get_default_config_template",
    "set_default_config",
]
