"""Event command - track events and list known event names."""

from __future__ import annotations

from typing import Any

from journy_cli.commands.base import GroupCommand, parse_json_object
from journy_cli.core.errors import PreconditionError
from journy_cli.ui.console import print_request_id, print_success
from journy_cli.ui.panels import print_listing


class EventCommand(GroupCommand):
    """Track and list events."""

    name = "event"
    description = "Track an event or list available events"
    usage = (
        "journy event track <name> [--user-id ID] [--account-id ID] [--metadata JSON] [--json]\n"
        "       journy event list [--json]"
    )
    aliases = ["events"]

    subcommands = {
        "track": "_track",
        "list": "_list",
        "ls": "_list",
    }

    def _track(self, flags: dict[str, Any], remaining: list[str]) -> bool:
        if not remaining:
            raise self.usage_error()
        name = remaining[0]
        user_id = self.option(flags, "user-id")
        account_id = self.option(flags, "account-id")

        self.require_auth()
        if not user_id and not account_id:
            raise PreconditionError("Either --user-id or --account-id (or both) must be provided")
        metadata = parse_json_object(self.option(flags, "metadata"))

        response = self.call(
            f'Tracking event "{name}"...',
            lambda api: api.track_event(name, user_id, account_id, metadata),
        )
        if response is None:
            return False
        if self.emit_json(flags, response):
            return True

        print_success(f'Event "{name}" tracked successfully')
        print_request_id(response.request_id)
        return True

    def _list(self, flags: dict[str, Any], remaining: list[str]) -> bool:
        response = self.call("Fetching events...", lambda api: api.get_events())
        if response is None:
            return False
        if self.emit_json(flags, response):
            return True

        print_listing(
            (response.data or {}).get("data") or [],
            [("name", "Event Name"), ("group", "Group")],
            title="Available Events",
            empty_message="No events found.",
        )
        return True
