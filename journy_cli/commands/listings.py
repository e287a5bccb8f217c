"""Properties and segments commands - read-only listings."""

from __future__ import annotations

from typing import Any

from journy_cli.commands.base import GroupCommand
from journy_cli.ui.panels import print_listing


class PropertiesCommand(GroupCommand):
    """List the properties known for users or accounts."""

    name = "properties"
    description = "List user or account properties"
    usage = "journy properties <users|accounts> [--json]"
    aliases = ["props"]

    subcommands = {
        "users": "_users",
        "accounts": "_accounts",
    }

    columns = [("name", "Property Name"), ("type", "Type")]

    def _users(self, flags: dict[str, Any], remaining: list[str]) -> bool:
        response = self.call("Fetching user properties...", lambda api: api.get_user_properties())
        if response is None:
            return False
        if self.emit_json(flags, response):
            return True

        print_listing(
            (response.data or {}).get("data") or [],
            self.columns,
            title="User Properties",
            empty_message="No user properties found.",
        )
        return True

    def _accounts(self, flags: dict[str, Any], remaining: list[str]) -> bool:
        response = self.call("Fetching account properties...", lambda api: api.get_account_properties())
        if response is None:
            return False
        if self.emit_json(flags, response):
            return True

        print_listing(
            (response.data or {}).get("data") or [],
            self.columns,
            title="Account Properties",
            empty_message="No account properties found.",
        )
        return True


class SegmentsCommand(GroupCommand):
    """List the segments defined for users or accounts."""

    name = "segments"
    description = "List user or account segments"
    usage = "journy segments <users|accounts> [--json]"
    aliases = ["segment"]

    subcommands = {
        "users": "_users",
        "accounts": "_accounts",
    }

    columns = [("id", "Segment ID"), ("name", "Name")]

    def _users(self, flags: dict[str, Any], remaining: list[str]) -> bool:
        response = self.call("Fetching user segments...", lambda api: api.get_user_segments())
        if response is None:
            return False
        if self.emit_json(flags, response):
            return True

        print_listing(
            (response.data or {}).get("data") or [],
            self.columns,
            title="User Segments",
            empty_message="No user segments found.",
        )
        return True

    def _accounts(self, flags: dict[str, Any], remaining: list[str]) -> bool:
        response = self.call("Fetching account segments...", lambda api: api.get_account_segments())
        if response is None:
            return False
        if self.emit_json(flags, response):
            return True

        print_listing(
            (response.data or {}).get("data") or [],
            self.columns,
            title="Account Segments",
            empty_message="No account segments found.",
        )
        return True
