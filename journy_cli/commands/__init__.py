"""CLI Commands for Journy."""

from journy_cli.commands.account import AccountCommand
from journy_cli.commands.config import ConfigCommand
from journy_cli.commands.event import EventCommand
from journy_cli.commands.help import HelpCommand
from journy_cli.commands.listings import PropertiesCommand, SegmentsCommand
from journy_cli.commands.misc import LinkCommand, SnippetCommand, ValidateCommand
from journy_cli.commands.user import UserCommand

__all__ = [
    "ConfigCommand",
    "UserCommand",
    "AccountCommand",
    "EventCommand",
    "PropertiesCommand",
    "SegmentsCommand",
    "LinkCommand",
    "ValidateCommand",
    "SnippetCommand",
    "HelpCommand",
]
