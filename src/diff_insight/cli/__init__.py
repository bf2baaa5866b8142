"""CLI entry point — registers all subcommands."""

from typing import Optional

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="diff-insight",
    help="Diff Insight - quick heuristic commentary on a code diff",
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"diff-insight {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Diff Insight - quick heuristic commentary on a code diff."""


# Import subcommands to register them
from .analyze import analyze as _analyze  # noqa: F401, E402
from .themes import themes as _themes  # noqa: F401, E402


def main() -> None:
    app()
