"""Command completion for the interactive shell."""

from __future__ import annotations

from collections.abc import Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

COMMANDS = {
    "config": "Manage the API key",
    "user": "Upsert or delete users",
    "account": "Manage accounts and members",
    "event": "Track or list events",
    "properties": "List user/account properties",
    "segments": "List user/account segments",
    "link": "Link a user to an account",
    "validate": "Validate the API key",
    "snippet": "Get the tracking snippet",
    "help": "Show help",
    "clear": "Clear the screen",
    "quit": "Exit the shell",
    "exit": "Exit the shell",
}

SUBCOMMANDS = {
    "config": ["set", "show", "unset", "path"],
    "user": ["upsert", "delete"],
    "account": ["upsert", "delete", "add-users", "remove-users"],
    "event": ["track", "list"],
    "properties": ["users", "accounts"],
    "segments": ["users", "accounts"],
    "help": [c for c in COMMANDS if c not in ("clear", "quit", "exit")],
}

COMMAND_OPTIONS = {
    "config": ["--api-key"],
    "user": ["--email", "--properties", "--json"],
    "account": ["--domain", "--properties", "--json"],
    "event": ["--user-id", "--account-id", "--metadata", "--json"],
    "properties": ["--json"],
    "segments": ["--json"],
    "link": ["--json"],
    "validate": ["--json"],
    "snippet": ["--json"],
}

OPTION_META = {
    "--api-key": "journy.io API key",
    "--email": "user email",
    "--domain": "account domain",
    "--properties": "JSON object",
    "--metadata": "JSON object",
    "--user-id": "user ID",
    "--account-id": "account ID",
    "--json": "JSON output",
}


class CommandCompleter(Completer):
    """Completer for shell commands, subcommands and options."""

    def get_completions(self, document: Document, complete_event) -> Iterable[Completion]:
        """Get completions for the current input with descriptions."""
        text = document.text_before_cursor
        words = text.split()

        if not words or (len(words) == 1 and not text.endswith(" ")):
            word = words[0].lower() if words else ""
            for cmd, desc in COMMANDS.items():
                if cmd.startswith(word):
                    yield Completion(
                        cmd,
                        start_position=-len(word),
                        display=cmd,
                        display_meta=desc,
                    )
            return

        cmd = words[0].lower()
        current = "" if text.endswith(" ") else words[-1]
        typed_args = len(words) - (1 if current else 0)

        candidates: list[str] = []
        if typed_args == 1:
            candidates.extend(SUBCOMMANDS.get(cmd, []))
        candidates.extend(COMMAND_OPTIONS.get(cmd, []))

        for candidate in candidates:
            if candidate.startswith(current):
                yield Completion(
                    candidate,
                    start_position=-len(current),
                    display=candidate,
                    display_meta=OPTION_META.get(candidate, ""),
                )
