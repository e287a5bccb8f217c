"""Utility functions for the interactive shell."""

from journy_cli.utils.completions import CommandCompleter
from journy_cli.utils.history import create_history

__all__ = ["CommandCompleter", "create_history"]
