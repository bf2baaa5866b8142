"""GitHub Actions formatter: one annotation per observation."""

from typing import List

from ..models import InsightReport
from .base import BaseFormatter


def _escape(value: str) -> str:
    # Workflow command data escaping
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _escape_property(value: str) -> str:
    return _escape(value).replace(":", "%3A").replace(",", "%2C")


class GithubFormatter(BaseFormatter):
    """Output GitHub Actions ``::notice`` / ``::warning`` annotations.

    Debug-logging changes become warnings; everything else is a notice.
    """

    def format(self, report: InsightReport) -> str:
        target = f" file={_escape_property(report.filename)}" if report.filename else ""
        lines: List[str] = []

        for change in report.changes:
            level = "warning" if "Debug logging" in change else "notice"
            lines.append(f"::{level}{target}::{_escape(change)}")
        for insight in report.insights:
            lines.append(f"::notice{target}::{_escape(insight)}")
        for tip in report.tips:
            lines.append(f"::notice{target}::{_escape(tip)}")

        return "\n".join(lines)
