"""
Utility functions for configuration loading.

This module provides common utilities used by configs:
- load_env_file: Parse .env style files
- load_yaml_file: Parse YAML config files
- get_nested: Look up dotted keys in parsed YAML
- safe_int / safe_bool: Parse values with fallback
"""

from pathlib import Path
from typing import Any

import yaml
from dotenv import dotenv_values


def load_env_file(path: Path) -> dict[str, str]:
    """Load a .env style file into a dictionary.

    Keys without a value (a bare ``KEY`` line) are skipped.

    Args:
        path: Path to the .env file

    Returns:
        Dictionary of key-value pairs, empty if the file does not exist
    """
    if not path.is_file():
        return {}

    return {key: value for key, value in dotenv_values(path).items() if value is not None}


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML file into a dictionary.

    Args:
        path: Path to the YAML file

    Returns:
        Dictionary from YAML content, or empty dict if the file is missing,
        unparsable, or not a mapping
    """
    if not path.is_file():
        return {}

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError):
        return {}

    return data if isinstance(data, dict) else {}


def get_nested(data: dict[str, Any], dotted_key: str, default: Any = None) -> Any:
    """Look up ``a.b.c`` in nested dictionaries.

    Returns ``default`` when any segment is missing or not a mapping.
    """
    current: Any = data
    for part in dotted_key.split("."):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


def safe_int(value: Any, default: int = 0) -> int:
    """Safely parse an integer.

    Args:
        value: Value to parse (can be None)
        default: Default value if parsing fails

    Returns:
        Parsed integer or default value
    """
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(value)
    except (ValueError, TypeError):
        return default


def safe_bool(value: Any, default: bool = False) -> bool:
    """Safely parse a boolean.

    Recognizes: true, false, yes, no, on, off, 1, 0 (case-insensitive).
    YAML already yields real booleans, which are returned as-is.

    Args:
        value: Value to parse (can be None)
        default: Default value if parsing fails

    Returns:
        Parsed boolean or default value
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value

    value_lower = str(value).lower().strip()
    if value_lower in ("true", "yes", "1", "on"):
        return True
    if value_lower in ("false", "no", "0", "off"):
        return False
    return default
