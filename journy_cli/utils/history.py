"""Shell history that keeps credentials out of memory and off disk."""

from __future__ import annotations

from pathlib import Path

from prompt_toolkit.history import FileHistory, History, InMemoryHistory

SECRET_FLAGS = ("--api-key",)


def contains_secret(line: str) -> bool:
    return any(flag in line for flag in SECRET_FLAGS)


class RedactingFileHistory(FileHistory):
    """FileHistory that drops lines carrying a secret flag."""

    def append_string(self, string: str) -> None:
        if contains_secret(string):
            return
        super().append_string(string)


class RedactingInMemoryHistory(InMemoryHistory):
    def append_string(self, string: str) -> None:
        if contains_secret(string):
            return
        super().append_string(string)


def create_history(history_file: Path | None = None) -> History:
    """History for the shell session; persisted when a file is given.

    PromptSession appends every accepted line itself, so callers must not
    append again.
    """
    if history_file is None:
        return RedactingInMemoryHistory()
    history_file.parent.mkdir(parents=True, exist_ok=True)
    return RedactingFileHistory(str(history_file))
