"""UI components for the Journy CLI."""

from journy_cli.ui.console import (
    console,
    err_console,
    print_error,
    print_json,
    print_request_id,
    print_success,
    print_warning,
)
from journy_cli.ui.panels import create_listing_table, print_listing
from journy_cli.ui.spinners import create_spinner
from journy_cli.ui.theme import Theme, get_theme

__all__ = [
    # Theme
    "Theme",
    "get_theme",
    # Console
    "console",
    "err_console",
    "print_error",
    "print_success",
    "print_warning",
    "print_request_id",
    "print_json",
    # Panels
    "create_listing_table",
    "print_listing",
    # Spinners
    "create_spinner",
]
