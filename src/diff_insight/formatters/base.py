"""Base formatter interface for Diff Insight output rendering."""

from abc import ABC, abstractmethod

from ..models import InsightReport


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    def render(self, report: InsightReport) -> None:
        """Print the formatted report to stdout."""
        print(self.format(report))

    @abstractmethod
    def format(self, report: InsightReport) -> str:
        """Return formatted string representation of the report."""
