"""Base command class for CLI commands."""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Optional

import httpx

from journy_cli.core.api_client import APIResponse, JournyClient
from journy_cli.core.config import CLIConfig
from journy_cli.core.errors import PreconditionError
from journy_cli.ui.console import print_error, print_json
from journy_cli.ui.spinners import create_spinner

logger = logging.getLogger(__name__)

MAX_USERS_PER_REQUEST = 100

NOT_CONFIGURED = (
    "API key not configured.\n\n"
    "Run the following to configure:\n"
    "  journy config set --api-key YOUR_API_KEY\n\n"
    "Get your API key at: https://system.journy.io"
)

INVALID_JSON = "Properties must be valid JSON. Example: '{\"name\":\"John\",\"plan\":\"Pro\"}'"


def parse_json_object(raw: Optional[str]) -> dict[str, Any]:
    """Parse a --properties/--metadata value into a JSON object.

    An absent value parses to an empty mapping. Anything that is not a JSON
    object is a PreconditionError.
    """
    if not raw:
        return {}
    try:
        value = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise PreconditionError(INVALID_JSON) from e
    if not isinstance(value, dict):
        raise PreconditionError(INVALID_JSON)
    return value


class BaseCommand(ABC):
    """Base class for all CLI commands."""

    name: str = "base"
    description: str = "Base command"
    usage: str = ""
    aliases: list[str] = []

    # Flags that never consume the following argument as their value
    switches: frozenset[str] = frozenset({"json", "help", "h"})

    def __init__(self, config: CLIConfig, transport: Optional[httpx.BaseTransport] = None):
        self.config = config
        self.transport = transport

    def client(self) -> JournyClient:
        """Build an API client with the credential as it is configured now."""
        return JournyClient(
            self.config.api_key,
            base_url=self.config.base_url,
            timeout=self.config.timeout,
            transport=self.transport,
        )

    def execute(self, args: list[str]) -> bool:
        """
        Execute the command.

        Args:
            args: Command arguments

        Returns:
            True if successful, False otherwise
        """
        flags, remaining = self.parse_flags(args)
        try:
            return self.run(flags, remaining)
        except PreconditionError as e:
            logger.debug("%s: precondition failed: %s", self.name, e.message)
            print_error(e.message)
            return False

    @abstractmethod
    def run(self, flags: dict[str, Any], remaining: list[str]) -> bool:
        """Run the command with parsed flags and positional arguments."""

    def parse_flags(self, args: list[str]) -> tuple[dict[str, Any], list[str]]:
        """Parse command-line flags from arguments."""
        flags = {}
        remaining = []

        i = 0
        while i < len(args):
            arg = args[i]
            if arg.startswith("--"):
                key = arg[2:]
                if "=" in key:
                    key, value = key.split("=", 1)
                    flags[key] = value
                elif key not in self.switches and i + 1 < len(args) and not args[i + 1].startswith("-"):
                    flags[key] = args[i + 1]
                    i += 1
                else:
                    flags[key] = True
            elif arg.startswith("-") and len(arg) == 2:
                key = arg[1]
                if key not in self.switches and i + 1 < len(args) and not args[i + 1].startswith("-"):
                    flags[key] = args[i + 1]
                    i += 1
                else:
                    flags[key] = True
            else:
                remaining.append(arg)
            i += 1

        return flags, remaining

    def usage_error(self) -> PreconditionError:
        return PreconditionError(f"Usage: {self.usage}")

    def option(self, flags: dict[str, Any], key: str) -> Optional[str]:
        """Return a string-valued option, rejecting a bare flag with no value."""
        value = flags.get(key)
        if value is True:
            raise PreconditionError(f"--{key} requires a value")
        return value or None

    def require_auth(self) -> None:
        if not self.config.is_configured():
            raise PreconditionError(NOT_CONFIGURED)

    def call(self, message: str, operation: Callable[[JournyClient], APIResponse]) -> Optional[APIResponse]:
        """Dispatch one API operation behind a spinner.

        Returns the response on success. On failure the classified message is
        printed and None is returned.
        """
        self.require_auth()

        with self.client() as api, create_spinner(message, style="loading"):
            response = operation(api)

        if not response.success:
            logger.debug(
                "%s: %s (status %s)",
                self.name,
                response.error.kind if response.error else "error",
                response.status_code,
            )
            print_error(response.message or "Request failed")
            return None

        logger.debug("%s: ok (request %s)", self.name, response.request_id)
        return response

    def emit_json(self, flags: dict[str, Any], response: APIResponse) -> bool:
        """Print the raw payload when --json was given. Returns True if printed."""
        if flags.get("json"):
            print_json(response.data)
            return True
        return False


class GroupCommand(BaseCommand):
    """A command whose first positional argument selects a subcommand."""

    # subcommand name -> method name
    subcommands: dict[str, str] = {}

    def run(self, flags: dict[str, Any], remaining: list[str]) -> bool:
        if not remaining or remaining[0].lower() not in self.subcommands:
            raise self.usage_error()
        handler = getattr(self, self.subcommands[remaining[0].lower()])
        return handler(flags, remaining[1:])
