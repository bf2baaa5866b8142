"""Themed text formatter, the report shown in a terminal."""

from typing import Optional

from ..engine import InsightEngine
from ..models import InsightReport
from .base import BaseFormatter


class TextFormatter(BaseFormatter):
    """Header line plus Key Changes, Insights and Tips sections."""

    def __init__(self, engine: Optional[InsightEngine] = None):
        self.engine = engine or InsightEngine()

    def render(self, report: InsightReport) -> None:
        # The report already ends with a newline
        print(self.format(report), end="")

    def format(self, report: InsightReport) -> str:
        return self.engine.render(report)
