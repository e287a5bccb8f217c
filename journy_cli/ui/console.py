"""Rich console instances and message helpers."""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.text import Text
from rich.panel import Panel
from rich import box
from journy_cli.ui.theme import get_theme


# Regular output goes to stdout, failures to stderr
console = Console(theme=get_theme().to_rich_theme(), highlight=True)
err_console = Console(theme=get_theme().to_rich_theme(), stderr=True)


def print_error(message: str, title: str = "Error") -> None:
    """Print an error message panel on stderr."""
    content = Text()
    content.append(message, style="#FF5252")

    err_console.print(Panel(
        content,
        title=f"[#FF5252 bold]✖ {title}[/#FF5252 bold]",
        title_align="left",
        border_style="#FF5252",
        box=box.ROUNDED,
        padding=(0, 2),
    ))


def print_success(message: str) -> None:
    """Print a one-line success message."""
    console.print(f"[success]✓[/success] {message}")


def print_warning(message: str) -> None:
    console.print(f"[warning]{message}[/warning]")


def print_request_id(request_id: str | None) -> None:
    """Print the request id of a mutating call for traceability."""
    console.print(f"[dim]Request ID: {request_id}[/dim]")


def print_json(data: Any) -> None:
    """Print raw API output as JSON."""
    console.print_json(json.dumps(data, indent=2))
