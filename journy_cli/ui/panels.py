"""Table components for displaying API listings."""

from __future__ import annotations

from typing import Any

from rich.table import Table

from journy_cli.ui.console import console

MAX_COLUMN_WIDTH = 50


def create_listing_table(
    rows: list[dict[str, Any]],
    columns: list[tuple[str, str]],
    title: str | None = None,
) -> Table:
    """Build a table from API rows.

    ``columns`` is a list of ``(key, label)`` pairs. Missing values render as
    ``N/A``.
    """
    table = Table(
        title=f"[primary.bold]{title}[/primary.bold]" if title else None,
        title_justify="left",
        show_header=True,
        header_style="table.header",
        border_style="muted",
        padding=(0, 2),
    )
    for key, label in columns:
        table.add_column(label, style="text", max_width=MAX_COLUMN_WIDTH, overflow="ellipsis")

    for row in rows:
        table.add_row(*[_cell(row.get(key)) for key, _ in columns])

    return table


def _cell(value: Any) -> str:
    if value is None or value == "":
        return "N/A"
    return str(value)


def print_listing(
    rows: list[dict[str, Any]],
    columns: list[tuple[str, str]],
    title: str,
    empty_message: str,
) -> None:
    """Print a listing table with a result count, or a notice when empty."""
    rows = [row for row in rows if isinstance(row, dict)]
    if not rows:
        console.print(f"[warning]{empty_message}[/warning]")
        return

    console.print()
    console.print(create_listing_table(rows, columns, title=title))
    console.print(f"[dim]{len(rows)} result(s)[/dim]")
