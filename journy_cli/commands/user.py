"""User command - create, update and delete users."""

from __future__ import annotations

from typing import Any

from journy_cli.commands.base import GroupCommand, parse_json_object
from journy_cli.ui.console import print_request_id, print_success


class UserCommand(GroupCommand):
    """Manage users."""

    name = "user"
    description = "Create, update or delete users"
    usage = "journy user <upsert|delete> <userId> [--email EMAIL] [--properties JSON] [--json]"
    aliases = ["users"]

    subcommands = {
        "upsert": "_upsert",
        "delete": "_delete",
    }

    def _upsert(self, flags: dict[str, Any], remaining: list[str]) -> bool:
        if not remaining:
            raise self.usage_error()
        user_id = remaining[0]
        email = self.option(flags, "email")

        self.require_auth()
        properties = parse_json_object(self.option(flags, "properties"))

        response = self.call(
            f"Upserting user {user_id}...",
            lambda api: api.upsert_user(user_id, email, properties),
        )
        if response is None:
            return False
        if self.emit_json(flags, response):
            return True

        print_success(f"User {user_id} upserted successfully")
        print_request_id(response.request_id)
        return True

    def _delete(self, flags: dict[str, Any], remaining: list[str]) -> bool:
        user_id = remaining[0] if remaining else None
        email = self.option(flags, "email")
        if not user_id and not email:
            raise self.usage_error()

        label = user_id or email
        response = self.call(
            f"Deleting user {label}...",
            lambda api: api.delete_user(user_id, email),
        )
        if response is None:
            return False
        if self.emit_json(flags, response):
            return True

        print_success(f"User {label} deleted successfully")
        return True
