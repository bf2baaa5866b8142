"""Analyze command — comment on one diff."""

import os
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from ..engine import InsightEngine
from ..exceptions import DiffInsightError
from ..formatters import TextFormatter, get_formatter
from ..logging_config import setup_logging
from ..models import AnalysisContext
from ..theme import set_color_enabled, set_theme
from . import app
from ._common import console, err_console, guess_filename, read_diff, resolve_settings


@app.command()
def analyze(
    diff_file: Optional[Path] = typer.Argument(
        None,
        help="Diff to analyze; omit or pass '-' to read stdin",
        show_default=False,
    ),
    filename: Optional[str] = typer.Option(
        None,
        "--filename",
        "-f",
        help="Name of the changed file (defaults to the diff's +++ header)",
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        help="Output format: text, json, github",
    ),
    theme: Optional[str] = typer.Option(
        None,
        "--theme",
        "-t",
        help="Color theme (see 'diff-insight themes')",
    ),
    color: Optional[bool] = typer.Option(
        None,
        "--color/--no-color",
        help="Force colors on or off (default: on for terminals)",
        show_default=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log detector results",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
) -> None:
    """Print heuristic commentary for a single diff.

    [bold cyan]Examples:[/bold cyan]

      git diff -- src/app.js | diff-insight analyze

      diff-insight analyze change.diff --filename src/app.test.js

      diff-insight analyze change.diff --format json
    """
    try:
        settings = resolve_settings(
            config=config,
            output_format=output_format,
            theme=theme,
            color=color,
            verbose=verbose,
            quiet=quiet,
        )
        logger = setup_logging(
            verbose=settings.verbose, quiet=settings.quiet, log_file=settings.log_file
        )
        set_theme(settings.theme)
        # An explicit --color wins; otherwise color only on a terminal without NO_COLOR
        if color is None:
            color = settings.color and console.is_terminal and "NO_COLOR" not in os.environ
        set_color_enabled(color)

        diff = read_diff(diff_file)
        name = filename if filename is not None else guess_filename(diff, diff_file)
        logger.debug("Analyzing %d bytes of diff for %s", len(diff), name or "<unnamed>")

        engine = InsightEngine()
        report = engine.inspect(AnalysisContext(diff=diff, filename=name))
    except DiffInsightError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(e.exit_code)

    if settings.output_format == "text":
        formatter = TextFormatter(engine)
    else:
        formatter = get_formatter(settings.output_format)
    formatter.render(report)
