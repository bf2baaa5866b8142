"""Data models for Diff Insight"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class AnalysisContext:
    """One diff and the name of the file it applies to."""

    diff: Optional[str] = ""
    filename: Optional[str] = ""


@dataclass(frozen=True)
class ChangedLines:
    """Added and removed lines of a diff, markers stripped, in diff order."""

    added: Tuple[str, ...] = ()
    removed: Tuple[str, ...] = ()

    @property
    def added_text(self) -> str:
        return "\n".join(self.added)


@dataclass
class InsightReport:
    """Everything the engine observed about one diff.

    The text report is a rendering of this record; formatters that need
    machine-readable output serialize it directly.
    """

    filename: str
    added_count: int
    removed_count: int
    changes: List[str] = field(default_factory=list)
    patterns: List[str] = field(default_factory=list)
    insights: List[str] = field(default_factory=list)
    tips: List[str] = field(default_factory=list)

    @property
    def is_quiet(self) -> bool:
        """True when no detector produced anything beyond the header."""
        return not (self.changes or self.insights or self.tips)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
