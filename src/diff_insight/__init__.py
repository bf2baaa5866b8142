"""
Diff Insight - heuristic commentary for code diffs

Reads the added and removed lines of a diff and prints short, emoji-tagged
advice: what kind of change each line looks like, which code patterns the
new code touches, and a few tips for the file being edited.
"""

__version__ = "0.1.0"
__author__ = "Naman Agarwal"

from .engine import InsightEngine, analyze
from .models import AnalysisContext, ChangedLines, InsightReport
from .theme import Colors, get_colors, set_theme

__all__ = [
    "analyze",  # Main entry point
    "InsightEngine",
    "AnalysisContext",
    "ChangedLines",
    "InsightReport",
    "Colors",
    "get_colors",
    "set_theme",
]
