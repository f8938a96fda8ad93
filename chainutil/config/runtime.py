"""
Runtime Configuration

Central configuration for logging and storage location defaults.
"""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from chainutil.schemas.errors import ConfigException

load_dotenv()

# Environment variable prefix
ENV_PREFIX = "CHAINUTIL_"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LoggingConfig:
    """Configuration for log output."""
    level: str = "INFO"
    file: Optional[str] = None

    def __post_init__(self):
        self.level = str(self.level).upper()
        if self.level not in _LOG_LEVELS:
            raise ConfigException(
                f"Invalid log level: {self.level}",
                details={"allowed": list(_LOG_LEVELS)},
            )


@dataclass
class StorageConfig:
    """
    Configuration for where relative storage paths are rooted.

    The file mode for created files is fixed (0644) and intentionally
    not configurable.
    """
    base_dir: Optional[str] = None

    def resolve(self, path: str | Path) -> Path:
        """Join a relative path onto base_dir; absolute paths pass through."""
        path = Path(path)
        if self.base_dir is None or path.is_absolute():
            return path
        return Path(self.base_dir) / path


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration for chainutil.

    Can be loaded from:
    - Environment variables
    - YAML file
    - Programmatic construction
    """
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    debug: bool = False
    extra: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - CHAINUTIL_LOG_LEVEL: Log level name
        - CHAINUTIL_LOG_FILE: Optional log file path
        - CHAINUTIL_STORAGE_DIR: Base directory for relative storage paths
        - CHAINUTIL_DEBUG: Enable debug mode (true/false)
        """
        overrides: dict[str, Any] = {}

        if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            overrides.setdefault("logging", {})["level"] = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
        if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
            overrides.setdefault("logging", {})["file"] = os.getenv(f"{ENV_PREFIX}LOG_FILE")

        if os.getenv(f"{ENV_PREFIX}STORAGE_DIR"):
            overrides.setdefault("storage", {})["base_dir"] = os.getenv(f"{ENV_PREFIX}STORAGE_DIR")

        if os.getenv(f"{ENV_PREFIX}DEBUG"):
            overrides["debug"] = os.getenv(f"{ENV_PREFIX}DEBUG", "false").lower() == "true"

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """Load configuration purely from environment variables."""
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigException(
                f"Config file must contain a mapping: {path}",
                details={"path": str(path), "type": type(data).__name__},
            )
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        logging_data = data.get("logging") or {}
        storage_data = data.get("storage") or {}

        try:
            logging_config = LoggingConfig(**logging_data)
            storage = StorageConfig(**storage_data)
        except TypeError as e:
            raise ConfigException(f"Invalid configuration: {e}") from e

        return cls(
            logging=logging_config,
            storage=storage,
            debug=bool(data.get("debug", False)),
            extra=data.get("extra") or {},
        )

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)

        if "logging" in overrides:
            merged = {"level": new_config.logging.level, "file": new_config.logging.file}
            merged.update(overrides["logging"])
            new_config.logging = LoggingConfig(**merged)

        if "storage" in overrides:
            for key, value in overrides["storage"].items():
                setattr(new_config.storage, key, value)

        if "debug" in overrides:
            new_config.debug = overrides["debug"]

        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "logging": {
                "level": self.logging.level,
                "file": self.logging.file,
            },
            "storage": {
                "base_dir": self.storage.base_dir,
            },
            "debug": self.debug,
            "extra": self.extra,
        }


def get_default_config_template() -> str:
    """Get a template YAML configuration file."""
    return """\
# chainutil configuration
logging:
  level: INFO
  file: null
storage:
  # Relative paths given to the CLI are resolved against this directory.
  base_dir: null
debug: false
"""


# Global default configuration
_default_config: Optional[RuntimeConfig] = None


def get_default_config() -> RuntimeConfig:
    """Get the default runtime configuration."""
    global _default_config
    if _default_config is None:
        _default_config = RuntimeConfig.from_env()
    return _default_config


def set_default_config(config: Optional[RuntimeConfig]) -> None:
    """Set (or reset with None) the default runtime configuration."""
    global _default_config
    _default_config = config
