"""Account command - manage accounts and their members."""

from __future__ import annotations

from typing import Any

from journy_cli.commands.base import MAX_USERS_PER_REQUEST, GroupCommand, parse_json_object
from journy_cli.core.errors import PreconditionError
from journy_cli.ui.console import print_request_id, print_success


class AccountCommand(GroupCommand):
    """Manage accounts."""

    name = "account"
    description = "Create, update or delete accounts and manage their users"
    usage = (
        "journy account <upsert|delete> <accountId> [--domain DOMAIN] [--properties JSON] [--json]\n"
        "       journy account <add-users|remove-users> <accountId> <userId>... [--json]"
    )
    aliases = ["accounts"]

    subcommands = {
        "upsert": "_upsert",
        "delete": "_delete",
        "add-users": "_add_users",
        "remove-users": "_remove_users",
    }

    def _upsert(self, flags: dict[str, Any], remaining: list[str]) -> bool:
        if not remaining:
            raise self.usage_error()
        account_id = remaining[0]
        domain = self.option(flags, "domain")

        self.require_auth()
        properties = parse_json_object(self.option(flags, "properties"))

        response = self.call(
            f"Upserting account {account_id}...",
            lambda api: api.upsert_account(account_id, domain, properties),
        )
        if response is None:
            return False
        if self.emit_json(flags, response):
            return True

        print_success(f"Account {account_id} upserted successfully")
        print_request_id(response.request_id)
        return True

    def _delete(self, flags: dict[str, Any], remaining: list[str]) -> bool:
        account_id = remaining[0] if remaining else None
        domain = self.option(flags, "domain")
        if not account_id and not domain:
            raise self.usage_error()

        label = account_id or domain
        response = self.call(
            f"Deleting account {label}...",
            lambda api: api.delete_account(account_id, domain),
        )
        if response is None:
            return False
        if self.emit_json(flags, response):
            return True

        print_success(f"Account {label} deleted successfully")
        return True

    def _members(self, remaining: list[str], verb: str) -> tuple[str, list[str]]:
        """Split positionals into an account id and 1..100 user ids."""
        if len(remaining) < 2:
            raise self.usage_error()
        self.require_auth()
        account_id, user_ids = remaining[0], remaining[1:]
        if len(user_ids) > MAX_USERS_PER_REQUEST:
            raise PreconditionError(f"Maximum {MAX_USERS_PER_REQUEST} users can be {verb} at once")
        return account_id, user_ids

    def _add_users(self, flags: dict[str, Any], remaining: list[str]) -> bool:
        account_id, user_ids = self._members(remaining, "added")

        response = self.call(
            f"Adding {len(user_ids)} user(s) to account {account_id}...",
            lambda api: api.add_users_to_account(account_id, user_ids),
        )
        if response is None:
            return False
        if self.emit_json(flags, response):
            return True

        print_success(f"Added {len(user_ids)} user(s) to account {account_id}")
        return True

    def _remove_users(self, flags: dict[str, Any], remaining: list[str]) -> bool:
        account_id, user_ids = self._members(remaining, "removed")

        response = self.call(
            f"Removing {len(user_ids)} user(s) from account {account_id}...",
            lambda api: api.remove_users_from_account(account_id, user_ids),
        )
        if response is None:
            return False
        if self.emit_json(flags, response):
            return True

        print_success(f"Removed {len(user_ids)} user(s) from account {account_id}")
        return True
