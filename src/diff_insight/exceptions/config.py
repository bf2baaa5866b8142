"""Configuration exceptions: settings files and themes."""

from typing import Any, Iterable

from .base import DiffInsightError


class ConfigurationError(DiffInsightError):
    """Base class for configuration-related errors."""

    exit_code = 81


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason


class UnknownThemeError(ConfigurationError):
    """Raised when a color theme name is not registered."""

    def __init__(self, name: str, available: Iterable[str] = ()):
        available = sorted(available)
        super().__init__(
            f"Unknown theme: {name!r}",
            details={"available": ", ".join(available)} if available else None,
        )
        self.name = name
        self.available = available
