"""Help command - display CLI help and documentation."""

from __future__ import annotations

from typing import Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from journy_cli import __app_name__, __version__
from journy_cli.commands.base import BaseCommand
from journy_cli.ui.console import console

COMMANDS = [
    {
        "name": "config",
        "aliases": "cfg",
        "description": "Set, show or remove the stored API key",
        "usage": "journy config set --api-key KEY | show | unset | path",
    },
    {
        "name": "user",
        "aliases": "users",
        "description": "Create, update or delete users",
        "usage": "journy user upsert <userId> [--email E] [--properties JSON]\n"
                 "  journy user delete <userId> [--email E]",
    },
    {
        "name": "account",
        "aliases": "accounts",
        "description": "Create, update or delete accounts and manage members (up to 100)",
        "usage": "journy account upsert <accountId> [--domain D] [--properties JSON]\n"
                 "  journy account delete <accountId> [--domain D]\n"
                 "  journy account add-users <accountId> <userId>...\n"
                 "  journy account remove-users <accountId> <userId>...",
    },
    {
        "name": "event",
        "aliases": "events",
        "description": "Track an event or list available events",
        "usage": "journy event track <name> [--user-id U] [--account-id A] [--metadata JSON]\n"
                 "  journy event list",
    },
    {
        "name": "properties",
        "aliases": "props",
        "description": "List user or account properties",
        "usage": "journy properties users | accounts",
    },
    {
        "name": "segments",
        "aliases": "segment",
        "description": "List user or account segments",
        "usage": "journy segments users | accounts",
    },
    {
        "name": "link",
        "aliases": "",
        "description": "Link a user to an account",
        "usage": "journy link <userId> <accountId>",
    },
    {
        "name": "validate",
        "aliases": "",
        "description": "Validate the configured API key",
        "usage": "journy validate",
    },
    {
        "name": "snippet",
        "aliases": "",
        "description": "Get the tracking snippet for website integration",
        "usage": "journy snippet",
    },
    {
        "name": "help",
        "aliases": "h, ?",
        "description": "Show this help message",
        "usage": "journy help [command]",
    },
]


class HelpCommand(BaseCommand):
    """Display help information."""

    name = "help"
    description = "Show help information"
    usage = "journy help [command]"
    aliases = ["h", "?"]

    def run(self, flags: dict[str, Any], remaining: list[str]) -> bool:
        if remaining:
            return self._show_command_help(remaining[0].lower())
        return self._show_general_help()

    def _show_general_help(self) -> bool:
        """Show general help with all commands."""
        console.print(
            f"\n[primary.bold]{__app_name__} CLI[/primary.bold] [muted]v{__version__}[/muted]"
            " - Track users, accounts, and events from your terminal\n"
        )

        table = Table(
            show_header=True,
            header_style="primary",
            border_style="muted",
            padding=(0, 2),
        )
        table.add_column("Command", style="command", width=12)
        table.add_column("Aliases", style="muted", width=10)
        table.add_column("Description", style="text")

        for cmd in COMMANDS:
            table.add_row(cmd["name"], cmd["aliases"], cmd["description"])

        console.print(Panel(
            table,
            title="[primary]Available Commands[/primary]",
            border_style="primary",
            padding=(1, 2),
        ))

        tips = Text()
        tips.append("Tips:\n", style="primary")
        tips.append("  • ", style="muted")
        tips.append("Use ", style="text")
        tips.append("journy help <command>", style="command")
        tips.append(" for detailed command help\n", style="text")
        tips.append("  • ", style="muted")
        tips.append("Add ", style="text")
        tips.append("--json", style="warning")
        tips.append(" to any command for raw API output\n", style="text")
        tips.append("  • ", style="muted")
        tips.append("Run ", style="text")
        tips.append("journy", style="command")
        tips.append(" with no arguments for an interactive shell", style="text")
        console.print(tips)

        return True

    def _show_command_help(self, cmd_name: str) -> bool:
        """Show detailed help for a specific command."""
        cmd = None
        for c in COMMANDS:
            aliases = [a.strip() for a in c["aliases"].split(",") if a.strip()]
            if cmd_name == c["name"] or cmd_name in aliases:
                cmd = c
                break

        if not cmd:
            console.print(f"[error]Unknown command: {cmd_name}[/error]")
            console.print("[muted]Use journy help to see available commands[/muted]")
            return False

        text = Text()
        text.append(f"{cmd['name']}\n\n", style="primary.bold")
        text.append(f"{cmd['description']}\n\n", style="text")
        text.append("Usage:\n", style="muted")
        text.append(f"  {cmd['usage']}\n", style="command")
        if cmd["aliases"]:
            text.append("\nAliases:\n", style="muted")
            text.append(f"  {cmd['aliases']}", style="tertiary")

        console.print()
        console.print(Panel(
            text,
            title=f"[primary]{cmd['name']}[/primary]",
            border_style="primary",
            padding=(1, 2),
        ))

        return True
