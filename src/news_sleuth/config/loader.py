"""
Configuration loader with YAML file support and environment variable overrides.

Priority (highest to lowest):
1. Environment variables
2. YAML configuration file
3. Default values (defined in settings.py)

Environment variables use the pattern: NEWS_SLEUTH__{SECTION}__{KEY}
Example: NEWS_SLEUTH__FETCHER__TIMEOUT_SECONDS=5
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from news_sleuth.config.settings import Settings
from news_sleuth.core.exceptions import ConfigurationError

ENV_PREFIX = "NEWS_SLEUTH"

# Module-level settings cache
_settings_instance: Settings | None = None


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Deep merge two dictionaries, with override taking precedence.

    Args:
        base: Base dictionary to merge into
        override: Dictionary with values to override

    Returns:
        Merged dictionary with override values taking precedence
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def _parse_env_value(value: str) -> Any:
    """
    Parse environment variable string into appropriate Python type.

    Args:
        value: String value from environment variable

    Returns:
        Parsed value (bool, int, float, None or string)
    """
    lowered = value.lower()

    if lowered in ("true", "yes", "on"):
        return True
    if lowered in ("false", "no", "off"):
        return False
    if lowered in ("none", "null", ""):
        return None

    try:
        return int(value)
    except ValueError:
        pass

    try:
        return float(value)
    except ValueError:
        pass

    return value


def _load_env_overrides(prefix: str = ENV_PREFIX) -> dict[str, Any]:
    """
    Load configuration overrides from environment variables.

    Variables follow {PREFIX}__{SECTION}__{KEY}, for example
    NEWS_SLEUTH__LOGGING__LEVEL=DEBUG.

    Args:
        prefix: Environment variable prefix to look for

    Returns:
        Dictionary of configuration overrides
    """
    overrides: dict[str, Any] = {}
    prefix_with_sep = f"{prefix}__"

    for key, value in os.environ.items():
        if not key.startswith(prefix_with_sep):
            continue

        key_path = key[len(prefix_with_sep):].lower().split("__")

        if len(key_path) < 2:
            continue

        current = overrides
        for part in key_path[:-1]:
            current = current.setdefault(part, {})

        current[key_path[-1]] = _parse_env_value(value)

    return overrides


def _load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file

    Returns:
        Dictionary of configuration values

    Raises:
        ConfigurationError: If the file is missing, unreadable YAML,
            or not a mapping
    """
    if not path.exists():
        raise ConfigurationError("Configuration file not found", path=str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in configuration file: {e}", path=str(path)
        ) from e

    # Empty file
    if content is None:
        return {}

    if not isinstance(content, dict):
        raise ConfigurationError(
            f"Configuration file must contain a mapping, got: {type(content).__name__}",
            path=str(path),
        )

    return content


def load_config(
    config_path: Path | str | None = None,
    env_prefix: str = ENV_PREFIX,
) -> Settings:
    """
    Load configuration from YAML file with environment variable overrides.

    Args:
        config_path: Path to YAML configuration file. If None, uses defaults only.
        env_prefix: Prefix for environment variables

    Returns:
        Validated Settings instance

    Raises:
        ConfigurationError: If config_path is given but cannot be loaded
        pydantic.ValidationError: If configuration values are invalid
    """
    config_data: dict[str, Any] = {}

    if config_path is not None:
        yaml_config = _load_yaml_file(Path(config_path))
        config_data = _deep_merge(config_data, yaml_config)

    env_overrides = _load_env_overrides(env_prefix)
    config_data = _deep_merge(config_data, env_overrides)

    return Settings(**config_data)


def get_settings(
    config_path: Path | str | None = None,
    reload: bool = False,
) -> Settings:
    """
    Get the global Settings instance, loading it if necessary.

    Args:
        config_path: Path to YAML configuration file (only used on first load or reload)
        reload: If True, force reload configuration from file

    Returns:
        Global Settings instance
    """
    global _settings_instance

    if _settings_instance is None or reload:
        _settings_instance = load_config(config_path or get_default_config_path())

    return _settings_instance


def reset_settings() -> None:
    """Reset the cached settings instance."""
    global _settings_instance
    _settings_instance = None


@lru_cache(maxsize=1)
def get_default_config_path() -> Path | None:
    """
    Find the default configuration file path.

    Searches, in order:
    1. ./config.yaml
    2. ./config/config.yaml
    3. ~/.news_sleuth/config.yaml

    Returns:
        Path to configuration file if found, None otherwise
    """
    search_paths = [
        Path.cwd() / "config.yaml",
        Path.cwd() / "config" / "config.yaml",
        Path.home() / ".news_sleuth" / "config.yaml",
    ]

    for path in search_paths:
        if path.exists():
            return path

    return None
