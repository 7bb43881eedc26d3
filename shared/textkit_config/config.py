"""
Configuration for the textkit command line and logging.

Loads configuration from:
1. Environment variables (highest priority)
2. ~/.config/textkit/textkit.env
3. ~/.config/textkit/config.yaml (or the file named by TEXTKIT_CONFIG)
4. Built-in defaults
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .base import BaseConfig, ValidationResult
from .utils import get_nested, load_env_file, load_yaml_file, safe_bool, safe_int


DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_CHUNK_SIZE = 3
DEFAULT_PAD_CHARACTER = " "

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_config_dir() -> Path:
    """Return the user configuration directory."""
    return Path.home() / ".config" / "textkit"


def get_config_file() -> Path:
    """Return the YAML configuration file, honoring TEXTKIT_CONFIG."""
    override = os.environ.get("TEXTKIT_CONFIG")
    if override:
        return Path(override).expanduser()
    return get_config_dir() / "config.yaml"


def get_env_file() -> Path:
    """Return the env-style configuration file."""
    return get_config_dir() / "textkit.env"


@dataclass
class TextkitConfig(BaseConfig):
    """Settings shared by the textkit CLI and its loggers.

    Attributes:
        log_level: Name of the log level applied to textkit loggers
        log_json: Emit JSON log lines instead of console format
        log_file: Optional rotating JSON log file
        escape_text: Default for the HTML text context of ``escape``
        escape_attr: Default for the HTML attribute context of ``escape``
        chunk_size: Default chunk length for ``chunk``
        chunk_from_beginning: Default chunking direction for ``chunk``
        pad_character: Default fill character for ``pad`` and ``crop``
    """

    log_level: str = DEFAULT_LOG_LEVEL
    log_json: bool = False
    log_file: Path | None = None
    escape_text: bool = True
    escape_attr: bool = True
    chunk_size: int = DEFAULT_CHUNK_SIZE
    chunk_from_beginning: bool = False
    pad_character: str = DEFAULT_PAD_CHARACTER

    @property
    def log_level_number(self) -> int:
        """Numeric value of log_level, falling back to the default level."""
        level = getattr(logging, self.log_level.upper(), None)
        return level if isinstance(level, int) else getattr(logging, DEFAULT_LOG_LEVEL)

    def validate(self) -> ValidationResult:
        """Validate textkit configuration."""
        errors: list[str] = []
        warnings: list[str] = []

        if self.log_level.upper() not in LOG_LEVELS:
            errors.append(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}")

        if self.chunk_size < 1:
            errors.append(f"chunk.size must be at least 1, got {self.chunk_size}")

        if not self.pad_character:
            errors.append("pad.character must not be empty")
        elif len(self.pad_character) > 1:
            warnings.append(
                f"pad.character {self.pad_character!r} has {len(self.pad_character)} characters; "
                "padded strings may overshoot the requested size"
            )

        if errors:
            return ValidationResult.invalid(errors, warnings)

        if not (self.escape_text or self.escape_attr):
            return ValidationResult.degraded(
                ["escape.text and escape.attr are both disabled; escape leaves input unchanged"],
                warnings,
            )

        return ValidationResult.valid(warnings)

    def to_dict(self) -> dict[str, Any]:
        """Return config as a nested dictionary mirroring config.yaml."""
        return {
            "log_level": self.log_level,
            "log_json": self.log_json,
            "log_file": str(self.log_file) if self.log_file else None,
            "escape": {"text": self.escape_text, "attr": self.escape_attr},
            "chunk": {"size": self.chunk_size, "at_beginning": self.chunk_from_beginning},
            "pad": {"character": self.pad_character},
        }

    @classmethod
    def from_env(cls) -> "TextkitConfig":
        """Load textkit configuration from environment and config files.

        Priority:
        1. TEXTKIT_* environment variables
        2. ~/.config/textkit/textkit.env
        3. config.yaml (nested keys such as ``chunk: {size: 4}``)
        """
        defaults = cls()
        env_file = load_env_file(get_env_file())
        yaml_config = load_yaml_file(get_config_file())

        def get_value(env_key: str, yaml_key: str, default: Any) -> Any:
            """Get a raw value from env, env file, then YAML."""
            if env_key in os.environ:
                return os.environ[env_key]
            if env_key in env_file:
                return env_file[env_key]
            return get_nested(yaml_config, yaml_key, default)

        log_file = get_value("TEXTKIT_LOG_FILE", "log_file", None)

        return cls(
            log_level=str(get_value("TEXTKIT_LOG_LEVEL", "log_level", defaults.log_level)),
            log_json=safe_bool(get_value("TEXTKIT_LOG_JSON", "log_json", None), defaults.log_json),
            log_file=Path(log_file).expanduser() if log_file else None,
            escape_text=safe_bool(
                get_value("TEXTKIT_ESCAPE_TEXT", "escape.text", None), defaults.escape_text
            ),
            escape_attr=safe_bool(
                get_value("TEXTKIT_ESCAPE_ATTR", "escape.attr", None), defaults.escape_attr
            ),
            chunk_size=safe_int(get_value("TEXTKIT_CHUNK_SIZE", "chunk.size", None), defaults.chunk_size),
            chunk_from_beginning=safe_bool(
                get_value("TEXTKIT_CHUNK_FROM_BEGINNING", "chunk.at_beginning", None),
                defaults.chunk_from_beginning,
            ),
            pad_character=str(
                get_value("TEXTKIT_PAD_CHARACTER", "pad.character", defaults.pad_character)
            ),
        )
