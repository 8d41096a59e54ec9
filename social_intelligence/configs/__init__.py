"""Configuration loading for the social intelligence engine."""

from .loader import (
    DEFAULT_CONFIG_PATH,
    load_config,
    load_default_config,
    validate_config,
    get_config_value,
    resolve_config,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "load_config",
    "load_default_config",
    "validate_config",
    "get_config_value",
    "resolve_config",
]
