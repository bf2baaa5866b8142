"""Color themes for terminal output.

The active theme is process-wide. Renderers only read it through
``get_colors()``; ``set_theme`` and ``set_color_enabled`` are the only
writers.

Example:
    >>> set_theme("mono")
    >>> get_colors().header("3+ 1- in app.js")
    '3+ 1- in app.js'
"""

import os
from typing import Callable, Dict, NamedTuple

from rich.color import ColorSystem
from rich.style import Style

from .exceptions import UnknownThemeError
from .logging_config import get_logger

logger = get_logger(__name__)

Decorator = Callable[[str], str]


class Colors(NamedTuple):
    """The four decorations a report uses."""

    header: Decorator
    accent: Decorator
    secondary: Decorator
    info: Decorator


class ThemeSpec(NamedTuple):
    """Rich style strings for each decoration slot."""

    header: str
    accent: str
    secondary: str
    info: str


THEMES: Dict[str, ThemeSpec] = {
    "default": ThemeSpec(
        header="bold cyan",
        accent="bold magenta",
        secondary="yellow",
        info="blue",
    ),
    "ocean": ThemeSpec(
        header="bold bright_blue",
        accent="bold cyan",
        secondary="bright_cyan",
        info="dodger_blue2",
    ),
    "mono": ThemeSpec(header="", accent="", secondary="", info=""),
}

DEFAULT_THEME = "default"

_active_theme = DEFAULT_THEME
_color_enabled = "NO_COLOR" not in os.environ


def _decorator(style_str: str) -> Decorator:
    if not style_str:
        return _plain

    style = Style.parse(style_str)

    def decorate(text: str) -> str:
        if not _color_enabled:
            return text
        return style.render(text, color_system=ColorSystem.TRUECOLOR)

    return decorate


def _plain(text: str) -> str:
    return text


def _build(spec: ThemeSpec) -> Colors:
    return Colors(*(_decorator(s) for s in spec))


_PALETTES: Dict[str, Colors] = {name: _build(spec) for name, spec in THEMES.items()}


def available_themes() -> list[str]:
    return sorted(_PALETTES)


def set_theme(name: str) -> None:
    """Switch the process-wide theme.

    Raises:
        UnknownThemeError: If ``name`` is not a registered theme
    """
    global _active_theme
    if name not in _PALETTES:
        raise UnknownThemeError(name, available=_PALETTES)
    logger.debug("Theme %s -> %s", _active_theme, name)
    _active_theme = name


def current_theme() -> str:
    return _active_theme


def set_color_enabled(enabled: bool) -> None:
    """Turn ANSI decoration on or off for every theme."""
    global _color_enabled
    _color_enabled = enabled


def color_enabled() -> bool:
    return _color_enabled


def get_colors() -> Colors:
    """Return the decorations of the active theme."""
    return _PALETTES[_active_theme]
