"""Single-call commands: link, validate and snippet."""

from __future__ import annotations

from typing import Any

from journy_cli.commands.base import BaseCommand
from journy_cli.ui.console import console, print_request_id, print_success


class LinkCommand(BaseCommand):
    """Link a user to an account."""

    name = "link"
    description = "Link a user to an account"
    usage = "journy link <userId> <accountId> [--json]"

    def run(self, flags: dict[str, Any], remaining: list[str]) -> bool:
        if len(remaining) != 2:
            raise self.usage_error()
        user_id, account_id = remaining

        response = self.call(
            f"Linking user {user_id} to account {account_id}...",
            lambda api: api.link_user_to_account(user_id, account_id),
        )
        if response is None:
            return False
        if self.emit_json(flags, response):
            return True

        print_success(f"User {user_id} linked to account {account_id}")
        return True


class ValidateCommand(BaseCommand):
    """Check that the configured API key is accepted."""

    name = "validate"
    description = "Validate the configured API key"
    usage = "journy validate [--json]"

    def run(self, flags: dict[str, Any], remaining: list[str]) -> bool:
        response = self.call("Validating API key...", lambda api: api.validate_api_key())
        if response is None:
            return False
        if self.emit_json(flags, response):
            return True

        print_success("API key is valid")
        print_request_id(response.request_id)
        return True


class SnippetCommand(BaseCommand):
    """Print the website tracking snippet."""

    name = "snippet"
    description = "Get the tracking snippet for website integration"
    usage = "journy snippet [--json]"

    def run(self, flags: dict[str, Any], remaining: list[str]) -> bool:
        response = self.call("Fetching tracking snippet...", lambda api: api.get_tracking_snippet())
        if response is None:
            return False
        if self.emit_json(flags, response):
            return True

        data = (response.data or {}).get("data") or {}
        snippet = data.get("snippet") if isinstance(data, dict) else None

        console.print("\n[highlight]Journy.io Tracking Snippet[/highlight]\n")
        # Printed verbatim so it can be copied into a page
        console.print(snippet or "No snippet found", markup=False, highlight=False, soft_wrap=True)
        console.print()
        return True
