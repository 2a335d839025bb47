"""Configuration loading and validation for sysfs feature discovery."""

from __future__ import annotations

from .exceptions import ConfigError, ConfigTypeError, ConfigValidationError
from .model import DEFAULT_WHITELIST, SysfsConfig, load_config, load_config_file
from .validate import validate_config

__all__ = [
    "ConfigError",
    "ConfigTypeError",
    "ConfigValidationError",
    "DEFAULT_WHITELIST",
    "SysfsConfig",
    "load_config",
    "load_config_file",
    "validate_config",
]
