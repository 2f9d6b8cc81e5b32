"""Runtime settings for esbuilders.

Values come from ``ESBUILDERS_*`` environment variables, or from a YAML/JSON
file passed to :func:`load_settings`.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings

from esbuilders.core.errors import ConfigurationError

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Builder runtime settings."""

    LOG_LEVEL: str = "WARNING"
    LOG_JSON: bool = False
    # Raise instead of silently dropping values outside an enumerated set
    STRICT_ENUMS: bool = False
    JSON_INDENT: Optional[int] = None

    model_config = {
        "env_prefix": "ESBUILDERS_",
        "case_sensitive": False,
    }


_settings_cache: Optional[Settings] = None


def get_settings() -> Settings:
    """Get cached settings instance."""
    global _settings_cache
    if _settings_cache is None:
        _settings_cache = Settings()
    return _settings_cache


def reset_settings() -> None:
    """Drop the cached instance so the next read re-evaluates the environment."""
    global _settings_cache
    _settings_cache = None


def load_settings(path: Union[str, Path]) -> Settings:
    """Load settings from a YAML or JSON file and install them as current.

    Args:
        path: File with a top-level mapping of setting names to values.
              Keys are matched case-insensitively.

    Returns:
        The installed Settings instance.

    Raises:
        ConfigurationError: If the file is missing, unparsable or invalid.
    """
    global _settings_cache
    file_path = Path(path)
    if not file_path.exists():
        raise ConfigurationError(f"Settings file not found: {file_path}")

    content = file_path.read_text(encoding="utf-8")
    try:
        if file_path.suffix == ".json":
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Cannot parse settings file {file_path}: {exc}") from exc

    data = data or {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Settings file {file_path} must contain a mapping")

    overrides: Dict[str, Any] = {str(k).upper(): v for k, v in data.items()}
    try:
        settings = Settings(**overrides)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid settings in {file_path}: {exc}") from exc

    _settings_cache = settings
    logger.info(f"Loaded settings from {file_path}")
    return settings


__all__ = ["Settings", "get_settings", "reset_settings", "load_settings"]
