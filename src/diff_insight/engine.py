"""Heuristic commentary for a single diff.

``InsightEngine`` reads the added and removed lines of a unified-style diff
and reports what the change looks like: which kind of edit each added line
is, which code patterns the added code touches, and a few context tips for
the file. Detection is plain string and regex matching against the fixed
tables in :mod:`diff_insight.patterns`; nothing is parsed.

Malformed or empty input is never an error. It yields empty line sets and
a report that carries only the header.

Example:
    >>> engine = InsightEngine()
    >>> report = engine.inspect(AnalysisContext("+const x = 1;\\n-var x = 1;\\n", "a.js"))
    >>> report.changes
    ['✨ Modernized to ES6+']
"""

import re
from typing import Callable, List, Optional, Sequence, Tuple

from .logging_config import get_logger
from .models import AnalysisContext, ChangedLines, InsightReport
from .patterns import (
    CHANGE_RULES,
    CONTEXT_TIPS,
    PATTERNS,
    ChangeRule,
    ContextTip,
    Pattern,
)
from .theme import Colors, get_colors

logger = get_logger(__name__)

# A single marker followed by anything but a second marker. Rejects the
# "+++"/"---" file headers but also "++x"/"--x" content lines.
_ADDED_RE = re.compile(r"^\+(?!\+)(.*)$", re.MULTILINE)
_REMOVED_RE = re.compile(r"^-(?!-)(.*)$", re.MULTILINE)

BULLET_INDENT = "   "

SECTION_CHANGES = "🔄 Key Changes:"
SECTION_INSIGHTS = "💡 Insights:"
SECTION_TIPS = "📝 Tips:"


def extract_lines(diff: Optional[str]) -> ChangedLines:
    """Split a diff into added and removed lines, markers stripped."""
    if not diff:
        return ChangedLines()
    # Lines may end in \r for CRLF diffs; keep content, drop the terminator.
    added = tuple(m.rstrip("\r") for m in _ADDED_RE.findall(diff))
    removed = tuple(m.rstrip("\r") for m in _REMOVED_RE.findall(diff))
    return ChangedLines(added=added, removed=removed)


def detect_change_type(
    added: Sequence[str],
    removed: Sequence[str],
    rules: Sequence[ChangeRule] = CHANGE_RULES,
) -> List[str]:
    """Label each added line by the first rule that accepts it."""
    changes: List[str] = []
    for line in added:
        trimmed = line.strip()
        for rule in rules:
            if rule.applies(trimmed, removed):
                changes.append(rule.display)
                break
    return changes


def detect_patterns(code: str, patterns: Sequence[Pattern] = PATTERNS) -> List[Pattern]:
    """Return every pattern whose regex matches somewhere in ``code``."""
    return [p for p in patterns if p.matches(code)]


def get_context_tips(
    filename: Optional[str],
    added: Sequence[str],
    tips: Sequence[ContextTip] = CONTEXT_TIPS,
) -> List[str]:
    """Return the messages of all tips that apply to this file and code."""
    filename = filename or ""
    code = " ".join(added)
    return [t.message for t in tips if t.applies(filename, code)]


class InsightEngine:
    """Produces the insight report for one diff at a time.

    The engine holds no per-call state. ``colors`` is the theme provider
    used when rendering; it defaults to the process-wide theme and is
    looked up on every render so theme switches take effect immediately.
    """

    def __init__(self, colors: Optional[Callable[[], Colors]] = None):
        self.patterns: Tuple[Pattern, ...] = PATTERNS
        self.change_rules: Tuple[ChangeRule, ...] = CHANGE_RULES
        self.context_tips: Tuple[ContextTip, ...] = CONTEXT_TIPS
        self._colors = colors or get_colors

    def inspect(self, context: AnalysisContext) -> InsightReport:
        """Run all detectors and return the structured result."""
        filename = context.filename or ""
        lines = extract_lines(context.diff)

        changes = detect_change_type(lines.added, lines.removed, self.change_rules)
        matched = detect_patterns(lines.added_text, self.patterns)
        tips = get_context_tips(filename, lines.added, self.context_tips)

        logger.debug(
            "%s: %d added, %d removed, %d changes, patterns=%s, %d tips",
            filename or "<unnamed>",
            len(lines.added),
            len(lines.removed),
            len(changes),
            [p.key for p in matched],
            len(tips),
        )

        return InsightReport(
            filename=filename,
            added_count=len(lines.added),
            removed_count=len(lines.removed),
            changes=changes,
            patterns=[p.key for p in matched],
            insights=[p.message for p in matched],
            tips=tips,
        )

    def render(self, report: InsightReport) -> str:
        """Render a report as themed text.

        The header is always present. Each section follows only when it
        has at least one item.
        """
        colors = self._colors()
        out = colors.header(
            f"\n{report.added_count}+ {report.removed_count}- in {report.filename}\n"
        )
        out += _section(SECTION_CHANGES, report.changes, colors.accent)
        out += _section(SECTION_INSIGHTS, report.insights, colors.info)
        out += _section(SECTION_TIPS, report.tips, colors.secondary)
        return out

    def analyze(self, context: AnalysisContext) -> str:
        """Inspect the diff and return the rendered report."""
        return self.render(self.inspect(context))


def _section(label: str, items: Sequence[str], color: Callable[[str], str]) -> str:
    if not items:
        return ""
    body = "".join(f"{BULLET_INDENT}{item}\n" for item in items)
    return f"\n{color(label)}\n{body}"


def analyze(diff: Optional[str], filename: Optional[str] = "") -> str:
    """Convenience wrapper: analyze one diff with the process-wide theme."""
    return InsightEngine().analyze(AnalysisContext(diff=diff, filename=filename))
