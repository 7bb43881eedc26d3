"""
Configuration framework for textkit.

This module provides:
- BaseConfig: Abstract base class for configurations
- ValidationResult: Result of configuration validation
- TextkitConfig: Settings for the textkit CLI and its loggers

Usage:
    from textkit_config import TextkitConfig

    config = TextkitConfig.from_env()
    result = config.validate()
    if not result.is_usable:
        print("Configuration errors found")
"""

from .base import BaseConfig, ConfigStatus, ValidationResult
from .config import TextkitConfig, get_config_dir, get_config_file, get_env_file


__all__ = [
    "BaseConfig",
    "ConfigStatus",
    "TextkitConfig",
    "ValidationResult",
    "get_config_dir",
    "get_config_file",
    "get_env_file",
]
