"""Main CLI entry point - one-shot commands and an interactive shell."""

from __future__ import annotations

import argparse
import logging
import shlex
import sys

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import HTML
from prompt_toolkit.styles import Style
from rich.logging import RichHandler

from journy_cli import __app_name__, __version__
from journy_cli.commands.account import AccountCommand
from journy_cli.commands.base import BaseCommand
from journy_cli.commands.config import ConfigCommand
from journy_cli.commands.event import EventCommand
from journy_cli.commands.help import HelpCommand
from journy_cli.commands.listings import PropertiesCommand, SegmentsCommand
from journy_cli.commands.misc import LinkCommand, SnippetCommand, ValidateCommand
from journy_cli.commands.user import UserCommand
from journy_cli.core.config import CLIConfig
from journy_cli.ui.console import console, err_console, print_error
from journy_cli.utils.completions import CommandCompleter
from journy_cli.utils.history import create_history

logger = logging.getLogger("journy_cli")

PROMPT_STYLE = Style.from_dict({
    "prompt": "#7C83FD bold",
    "completion-menu": "bg:#1a1a2e #e8e8e8",
    "completion-menu.completion": "bg:#1a1a2e #7c83fd",
    "completion-menu.completion.current": "bg:#00c2a8 #ffffff bold",
    "completion-menu.meta.completion": "bg:#1a1a2e #888888",
    "completion-menu.meta.completion.current": "bg:#00c2a8 #e8e8e8",
})

COMMAND_CLASSES: list[type[BaseCommand]] = [
    ConfigCommand,
    UserCommand,
    AccountCommand,
    EventCommand,
    PropertiesCommand,
    SegmentsCommand,
    LinkCommand,
    ValidateCommand,
    SnippetCommand,
    HelpCommand,
]


def build_commands(config: CLIConfig, transport=None) -> dict[str, BaseCommand]:
    """Instantiate every command and index it by name and aliases."""
    registry: dict[str, BaseCommand] = {}
    for command_class in COMMAND_CLASSES:
        command = command_class(config, transport=transport)
        registry[command.name] = command
        for alias in command.aliases:
            registry[alias] = command
    return registry


def configure_logging(verbose: bool) -> None:
    """Route log records through rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)


def run_command(commands: dict[str, BaseCommand], name: str, args: list[str]) -> bool:
    """Execute a single command by name. Unknown names fail."""
    command = commands.get(name.lower())
    if command is None:
        print_error(f"Unknown command: {name}")
        console.print("[muted]Use journy help to see available commands[/muted]")
        return False
    logger.debug("running %s", command.name)
    return command.execute(args)


class JournyShell:
    """Interactive shell running one command per line."""

    def __init__(self, config: CLIConfig, input=None, output=None):
        self.config = config
        self.commands = build_commands(config)
        self.session = PromptSession(
            history=create_history(config.history_file),
            input=input,
            output=output,
            completer=CommandCompleter(),
            style=PROMPT_STYLE,
            complete_while_typing=True,
        )

    def get_prompt(self) -> HTML:
        """Generate the prompt."""
        return HTML("<prompt>journy ❯</prompt> ")

    def run(self) -> int:
        """Run the shell loop until quit or EOF."""
        console.print(
            f"[primary.bold]{__app_name__} CLI[/primary.bold] [muted]v{__version__}[/muted]"
            "  [muted]Type help for commands, quit to exit.[/muted]\n"
        )

        while True:
            try:
                line = self.session.prompt(self.get_prompt()).strip()
                if not line:
                    continue

                try:
                    parts = shlex.split(line)
                except ValueError as e:
                    print_error(f"Could not parse input: {e}")
                    continue

                name, args = parts[0].lower(), parts[1:]
                if name in ("quit", "exit"):
                    console.print("[muted]Goodbye.[/muted]")
                    return 0
                if name == "clear":
                    console.clear()
                    continue

                run_command(self.commands, name, args)
                console.print()

            except KeyboardInterrupt:
                console.print("\n[muted]Type quit to exit[/muted]")
            except EOFError:
                console.print("\n[muted]Goodbye.[/muted]")
                return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="journy",
        description="Journy.io CLI - Track users, accounts, and events from your terminal",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-h",
        "--help",
        action="store_true",
        help="Show help and exit",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"{__app_name__} CLI {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log requests and failures to stderr",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="API base URL (default: https://api.journy.io, env JOURNY_BASE_URL)",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help="Command to execute (starts an interactive shell if omitted)",
    )
    parser.add_argument("args", nargs=argparse.REMAINDER)

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    config = CLIConfig.load(base_url=args.base_url)

    if args.command:
        commands = build_commands(config)
        return 0 if run_command(commands, args.command, args.args) else 1

    if args.help or not sys.stdin.isatty():
        commands = build_commands(config)
        commands["help"].execute([])
        return 0

    return JournyShell(config).run()


def run() -> None:
    """Console script wrapper."""
    sys.exit(main())


if __name__ == "__main__":
    run()
