"""
Commands every console ships with: help, clear and exit.
"""

from dataclasses import dataclass
from typing import Optional

import typer
from typing_extensions import Annotated

from frame_console.app import ConsoleApp
from frame_console.command import ConsoleCommand
from frame_console.parser import TyperParser


@dataclass(frozen=True)
class HelpCommand:
    command: Optional[str] = None


@dataclass(frozen=True)
class ClearCommand:
    pass


@dataclass(frozen=True)
class ExitCommand:
    pass


def _help_args(
    command: Annotated[
        Optional[str], typer.Argument(help="Command to show detailed help for")
    ] = None,
) -> HelpCommand:
    return HelpCommand(command)


def _clear_args() -> ClearCommand:
    return ClearCommand()


def _exit_args() -> ExitCommand:
    return ExitCommand()


def _summary(help_text: str) -> str:
    return help_text.splitlines()[0] if help_text else ""


def add_builtin_commands(app: ConsoleApp) -> None:
    """Register the built-in commands on the given console."""

    def help_command(cmd: ConsoleCommand[HelpCommand]) -> None:
        match cmd.take():
            case HelpCommand(command=None):
                lines = ["Available commands:"]
                for spec in app.registry:
                    summary = _summary(spec.help)
                    lines.append(
                        f"  {spec.name} - {summary}" if summary else f"  {spec.name}"
                    )
                cmd.reply_ok("\n".join(lines))
            case HelpCommand(command=str() as name):
                spec = app.registry.lookup(name)
                if spec is None:
                    cmd.reply_failed(f"error: Unknown command `{name}`")
                else:
                    cmd.reply_ok(spec.parser.render_help())
            case _:
                pass

    def clear_command(cmd: ConsoleCommand[ClearCommand]) -> None:
        if isinstance(cmd.take(), ClearCommand):
            app.state.clear_scrollback()

    def exit_command(cmd: ConsoleCommand[ExitCommand]) -> None:
        if isinstance(cmd.take(), ExitCommand):
            app.exit_requested = True

    app.add_console_command(
        TyperParser("help", _help_args, help="Show available commands"), help_command
    )
    app.add_console_command(
        TyperParser("clear", _clear_args, help="Clear the console scrollback"),
        clear_command,
    )
    app.add_console_command(
        TyperParser("exit", _exit_args, help="Exit the application"), exit_command
    )
