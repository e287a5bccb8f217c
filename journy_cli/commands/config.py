"""Config command - manage the stored API key."""

from __future__ import annotations

from typing import Any

from rich.text import Text

from journy_cli.commands.base import GroupCommand
from journy_cli.ui.console import console, print_error, print_success, print_warning


def mask_api_key(api_key: str) -> str:
    """Show only the first 8 and last 4 characters of a key."""
    if len(api_key) <= 12:
        return api_key[:2] + "..." if len(api_key) > 2 else "..."
    return f"{api_key[:8]}...{api_key[-4:]}"


class ConfigCommand(GroupCommand):
    """Manage CLI configuration."""

    name = "config"
    description = "Manage CLI configuration"
    usage = "journy config <set|show|unset|path> [--api-key KEY]"
    aliases = ["cfg"]

    subcommands = {
        "set": "_set",
        "show": "_show",
        "unset": "_unset",
        "path": "_path",
    }

    def _set(self, flags: dict[str, Any], remaining: list[str]) -> bool:
        api_key = self.option(flags, "api-key")
        if not api_key:
            print_error("No options provided. Use --api-key")
            return False

        self.config.store.set("apiKey", api_key.strip())
        print_success("API key set")
        if (self.config.settings.api_key or "").strip():
            print_warning("JOURNY_API_KEY is set in the environment and overrides the stored key")
        return True

    def _show(self, flags: dict[str, Any], remaining: list[str]) -> bool:
        api_key = self.config.api_key
        source = "environment" if (self.config.settings.api_key or "").strip() else "config file"

        text = Text()
        text.append("\nJourny.io CLI Configuration\n\n", style="highlight")
        text.append("API Key:  ", style="muted")
        if api_key:
            text.append(mask_api_key(api_key), style="success")
            text.append(f"  ({source})", style="dim")
        else:
            text.append("not set", style="error")
        text.append("\nAPI URL:  ", style="muted")
        text.append(self.config.base_url, style="url")
        text.append("\n")
        console.print(text)
        return True

    def _unset(self, flags: dict[str, Any], remaining: list[str]) -> bool:
        if self.config.store.unset("apiKey"):
            print_success("API key removed")
        else:
            print_warning("No API key stored.")
        return True

    def _path(self, flags: dict[str, Any], remaining: list[str]) -> bool:
        console.print(str(self.config.store.path), markup=False, highlight=False)
        return True
