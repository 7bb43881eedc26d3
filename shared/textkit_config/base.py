"""
Base classes and types for the configuration framework.

This module provides:
- ConfigStatus: Enum for validation states (VALID, INVALID, DEGRADED)
- ValidationResult: Result of config validation with errors/warnings
- BaseConfig: Abstract base class for all config classes
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ConfigStatus(Enum):
    """Status of configuration validation."""

    VALID = "valid"
    INVALID = "invalid"
    DEGRADED = "degraded"  # Usable, but some commands lose their effect


@dataclass
class ValidationResult:
    """Result of validating a configuration.

    Attributes:
        status: Overall validation status
        errors: List of validation errors (config is invalid if non-empty)
        warnings: List of validation warnings (config works but has issues)
    """

    status: ConfigStatus
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Return True if config is valid (no errors)."""
        return self.status == ConfigStatus.VALID

    @property
    def is_usable(self) -> bool:
        """Return True if config is usable (valid or degraded)."""
        return self.status in (ConfigStatus.VALID, ConfigStatus.DEGRADED)

    @classmethod
    def valid(cls, warnings: list[str] | None = None) -> "ValidationResult":
        """Create a valid result with optional warnings."""
        return cls(status=ConfigStatus.VALID, warnings=warnings or [])

    @classmethod
    def invalid(cls, errors: list[str], warnings: list[str] | None = None) -> "ValidationResult":
        """Create an invalid result with errors."""
        return cls(status=ConfigStatus.INVALID, errors=errors, warnings=warnings or [])

    @classmethod
    def degraded(cls, errors: list[str], warnings: list[str] | None = None) -> "ValidationResult":
        """Create a degraded result (partially valid)."""
        return cls(status=ConfigStatus.DEGRADED, errors=errors, warnings=warnings or [])


class BaseConfig(ABC):
    """Abstract base class for configurations.

    Subclasses implement:
    - validate(): Check if the configuration is valid
    - to_dict(): Return config as a plain dict
    - from_env(): Class method to load config from environment and files
    """

    @abstractmethod
    def validate(self) -> ValidationResult:
        """Validate the configuration.

        Returns:
            ValidationResult with status, errors, and warnings
        """
        ...

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Return configuration as a JSON-serializable dictionary."""
        ...

    @classmethod
    @abstractmethod
    def from_env(cls) -> "BaseConfig":
        """Load configuration from environment variables and config files.

        This method should:
        1. Check environment variables first
        2. Fall back to config files (~/.config/textkit/)
        3. Apply defaults for optional values
        """
        ...

    @property
    def config_name(self) -> str:
        """Return the name of this configuration.

        Default implementation returns the class name without 'Config' suffix.
        """
        name = self.__class__.__name__
        if name.endswith("Config"):
            name = name[:-6]
        return name.lower()
