"""Themes command — list color themes."""

from rich.table import Table

from ..theme import THEMES, current_theme
from . import app
from ._common import console


@app.command()
def themes() -> None:
    """List the available color themes."""
    table = Table(title="Color Themes", expand=False)
    table.add_column("Name", style="bold")
    table.add_column("Header")
    table.add_column("Accent")
    table.add_column("Secondary")
    table.add_column("Info")

    active = current_theme()
    for name in sorted(THEMES):
        spec = THEMES[name]
        label = f"{name} [dim](active)[/dim]" if name == active else name
        table.add_row(
            label,
            *(f"[{s}]{s}[/]" if s else "[dim]plain[/dim]" for s in spec),
        )

    console.print(table)
