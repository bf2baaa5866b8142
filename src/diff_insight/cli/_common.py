"""Shared CLI helpers."""

import re
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import InsightSettings, load_settings
from ..exceptions import ConfigurationError, DiffInsightError, DiffSourceError

console = Console()
err_console = Console(stderr=True)

# Path runs to a tab (timestamp separator) or the end of the line
_NEW_FILE_RE = re.compile(r"^\+\+\+ (?:b/)?([^\t\r\n]+)", re.MULTILINE)


class ExitCode:
    """Semantic exit codes for CI observability.

    Ranges:
      0: Success
      81-82: User errors (bad config, unreadable diff)
      100+: Internal errors
    """

    SUCCESS = 0
    CONFIG_ERROR = ConfigurationError.exit_code
    PATH_NOT_FOUND = DiffSourceError.exit_code
    INTERNAL_ERROR = DiffInsightError.exit_code


def resolve_settings(
    config: Optional[Path] = None,
    output_format: Optional[str] = None,
    theme: Optional[str] = None,
    color: Optional[bool] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> InsightSettings:
    """Build settings from CLI options."""
    return load_settings(
        config_file=config,
        output_format=output_format,
        theme=theme,
        color=color,
        verbose=verbose,
        quiet=quiet,
    )


def read_diff(source: Optional[Path]) -> str:
    """Read diff text from a file, or from stdin when source is None or '-'.

    Raises:
        DiffSourceError: If the file is missing or unreadable
    """
    if source is None or str(source) == "-":
        return sys.stdin.read()

    if not source.exists():
        raise DiffSourceError("file not found", path=source)
    if not source.is_file():
        raise DiffSourceError("not a regular file", path=source)
    try:
        return source.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise DiffSourceError(str(e), path=source)


def guess_filename(diff: str, source: Optional[Path] = None) -> str:
    """Pick a display filename: the diff's '+++' header, else the diff file's name."""
    match = _NEW_FILE_RE.search(diff)
    if match:
        path = match.group(1).strip()
        if path and path != "/dev/null":
            return path
    if source is not None and str(source) != "-":
        return source.name
    return ""
