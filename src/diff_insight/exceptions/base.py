"""Base exception for Diff Insight."""

from typing import Dict, Optional


class DiffInsightError(Exception):
    """Base exception for all Diff Insight errors.

    ``exit_code`` is the process exit status the CLI uses when this error
    ends a command.
    """

    exit_code = 100

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({details_str})"
