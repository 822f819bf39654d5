"""
Configuration management for workflowquery.

Settings come from a YAML file, environment variables, or code.

Example:
    >>> from workflowquery.config import load_config, set_settings
    >>>
    >>> settings = load_config("./workflowquery.yaml")
    >>> set_settings(settings)
"""

import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Optional, Union

import yaml

from .core.exceptions import ConfigurationError
from .utils.logging import LOG_LEVELS


CONFIG_ENV_VAR = "WORKFLOWQUERY_CONFIG"
DEFAULT_CONFIG_FILE = "workflowquery.yaml"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """
    Settings container for workflowquery.

    log_level and log_format take effect only once passed to
    ``configure_logging``; loading settings never touches logging.

    Attributes:
        strict_validation: Default strict mode for new ClauseBuilders
        log_level: Level of the ``workflowquery`` logger
        log_format: Custom logging format string
    """
    strict_validation: bool = False
    log_level: str = "WARNING"
    log_format: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.strict_validation, bool):
            raise ConfigurationError(
                "strict_validation must be a boolean, got "
                f"{type(self.strict_validation).__name__} {self.strict_validation!r}"
            )
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log_level {self.log_level!r}, expected one of "
                f"{', '.join(LOG_LEVELS)}"
            )
        self.log_level = self.log_level.upper()
        if self.log_format is not None and not isinstance(self.log_format, str):
            raise ConfigurationError(
                f"log_format must be a string, got {type(self.log_format).__name__}"
            )

    @classmethod
    def from_dict(cls, data: dict) -> "Settings":
        """Create Settings from dictionary."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(
                f"Unknown settings: {', '.join(sorted(unknown))}"
            )
        return cls(**data)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables."""
        strict = os.getenv("WORKFLOWQUERY_STRICT", "")
        return cls(
            strict_validation=strict.strip().lower() in _TRUTHY,
            log_level=os.getenv("WORKFLOWQUERY_LOG_LEVEL", "WARNING"),
        )

    def to_dict(self) -> dict:
        """Convert Settings to dictionary."""
        return asdict(self)


def get_default_config_path() -> Path:
    """Get path to the default configuration file."""
    env_config = os.environ.get(CONFIG_ENV_VAR)
    if env_config:
        return Path(env_config)
    return Path(".") / DEFAULT_CONFIG_FILE


def load_config(config_path: Optional[Union[str, Path]] = None) -> Settings:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to config file. If None, uses the default.

    Returns:
        Settings loaded from the file, or defaults if it does not exist

    Raises:
        ConfigurationError: If the file is not a YAML mapping of known settings
    """
    path = get_default_config_path() if config_path is None else Path(config_path)

    if not path.exists():
        return Settings()

    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return Settings()

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration in {path} must be a mapping, "
            f"got {type(data).__name__}"
        )

    return Settings.from_dict(data)


# Global settings
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings


def set_settings(settings: Optional[Settings]) -> None:
    """Replace the global settings (None reloads them on next access)."""
    global _settings
    _settings = settings
