"""Input exceptions: getting the diff to analyze."""

from pathlib import Path
from typing import Optional

from .base import DiffInsightError


class DiffSourceError(DiffInsightError):
    """Raised when the diff to analyze cannot be read."""

    exit_code = 82

    def __init__(self, reason: str, path: Optional[Path] = None):
        details = {"reason": reason}
        if path:
            details["path"] = str(path)

        super().__init__(f"Cannot read diff: {reason}", details=details)
        self.reason = reason
        self.path = path
