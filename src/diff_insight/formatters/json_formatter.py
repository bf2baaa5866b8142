"""JSON formatter for Diff Insight."""

import json

from ..models import InsightReport
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render the report record as JSON."""

    def format(self, report: InsightReport) -> str:
        return json.dumps(report.to_dict(), indent=2, ensure_ascii=False)
