"""Exception hierarchy for Diff Insight."""

from .analysis import DiffSourceError
from .base import DiffInsightError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    UnknownThemeError,
)

__all__ = [
    "DiffInsightError",
    "ConfigurationError",
    "InvalidConfigError",
    "UnknownThemeError",
    "DiffSourceError",
]
