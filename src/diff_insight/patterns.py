"""Fixed detection tables.

Three independent tables drive the engine:

- ``PATTERNS``: regex rules run over the joined added code. Order is the
  order insights are reported in.
- ``CHANGE_RULES``: per-line classifiers. The first rule that accepts a
  line labels it; a line gets at most one label.
- ``CONTEXT_TIPS``: advice gated on the filename or the added text. Every
  tip is tested on its own, so several can fire together.

All tables are module-level tuples and never mutated.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Sequence

# ==============================================================================
# Code patterns
# ==============================================================================


@dataclass(frozen=True)
class Pattern:
    """A named regex and the advice shown when it matches.

    Attributes:
        key:     Symbolic name (async, hooks, api, error, perf).
        regex:   Searched anywhere in the added code.
        message: Insight shown when the regex matches.
    """

    key: str
    regex: re.Pattern[str]
    message: str

    def matches(self, code: str) -> bool:
        return self.regex.search(code) is not None


# Unanchored, so a match inside any substring is a match in the whole text.
PATTERNS: tuple[Pattern, ...] = (
    Pattern(
        key="async",
        regex=re.compile(r"async|await"),
        message="⚡ Async code: make sure every promise is awaited or its errors are caught",
    ),
    Pattern(
        key="hooks",
        regex=re.compile(r"use(?:State|Effect|Context|Reducer|Ref|Memo|Callback|LayoutEffect)"),
        message="🪝 React hooks: keep dependency arrays complete and call hooks unconditionally",
    ),
    Pattern(
        key="api",
        regex=re.compile(r"fetch\(|axios|\.(?:get|post|put|patch|delete)\("),
        message="🌐 API call: handle loading, failure and timeout states",
    ),
    Pattern(
        key="error",
        regex=re.compile(r"try\s*\{|catch\s*\(|\.catch\(|throw "),
        message="🛡️ Error handling: log or surface errors instead of swallowing them",
    ),
    Pattern(
        key="perf",
        regex=re.compile(r"useMemo|React\.memo|memo\(|debounce|throttle"),
        message="🚀 Performance: memoization only pays off for expensive work, measure first",
    ),
)

PATTERN_KEYS: tuple[str, ...] = tuple(p.key for p in PATTERNS)


# ==============================================================================
# Change types
# ==============================================================================


@dataclass(frozen=True)
class ChangeRule:
    """Classifies a single trimmed added line.

    Attributes:
        label:   What the change is called in the report.
        emoji:   Tag printed before the label.
        applies: Callable (added_line, removed_lines) -> bool.
    """

    label: str
    emoji: str
    applies: Callable[[str, Sequence[str]], bool]

    @property
    def display(self) -> str:
        return f"{self.emoji} {self.label}"


def _modernized(line: str, removed: Sequence[str]) -> bool:
    return "const" in line and any("var" in r for r in removed)


def _made_async(line: str, removed: Sequence[str]) -> bool:
    # Any removed "async" disables this for the whole diff; lines are not paired.
    return "async" in line and not any("async" in r for r in removed)


def _added_try(line: str, removed: Sequence[str]) -> bool:
    return "try {" in line


def _console_logging(line: str, removed: Sequence[str]) -> bool:
    return "console." in line


# Priority order
CHANGE_RULES: tuple[ChangeRule, ...] = (
    ChangeRule(label="Modernized to ES6+", emoji="✨", applies=_modernized),
    ChangeRule(label="Made asynchronous", emoji="⚡", applies=_made_async),
    ChangeRule(label="Added error handling", emoji="🛡️", applies=_added_try),
    ChangeRule(label="Debug logging (remove for prod)", emoji="🐛", applies=_console_logging),
)


# ==============================================================================
# Context tips
# ==============================================================================


@dataclass(frozen=True)
class ContextTip:
    """A tip and its gate: Callable (filename, added_text) -> bool."""

    key: str
    message: str
    applies: Callable[[str, str], bool]


def _is_test_file(filename: str, code: str) -> bool:
    return "test" in filename


def _state_without_callback(filename: str, code: str) -> bool:
    return "useState" in code and "useCallback" not in code


def _loose_equality(filename: str, code: str) -> bool:
    return "==" in code and "===" not in code


def _uncleared_timeout(filename: str, code: str) -> bool:
    return "setTimeout" in code and "clear" not in code


CONTEXT_TIPS: tuple[ContextTip, ...] = (
    ContextTip(
        key="aaa",
        message="🧪 Structure tests as Arrange, Act, Assert",
        applies=_is_test_file,
    ),
    ContextTip(
        key="use-callback",
        message="💡 Consider useCallback for handlers passed to children",
        applies=_state_without_callback,
    ),
    ContextTip(
        key="strict-equality",
        message="⚠️ Prefer === over == to avoid type coercion",
        applies=_loose_equality,
    ),
    ContextTip(
        key="clear-timeout",
        message="⏱️ Clear timeouts on cleanup to avoid leaks",
        applies=_uncleared_timeout,
    ),
)
