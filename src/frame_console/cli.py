import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, Optional

import typer
from typing_extensions import Annotated

from frame_console.app import ConsoleApp
from frame_console.builtins import add_builtin_commands
from frame_console.command import ConsoleCommand
from frame_console.console.repl_console import ReplConsole
from frame_console.logger import setup_logging
from frame_console.parser import TyperParser
from frame_console.runtime_config import (
    DEFAULT_HISTORY_SIZE,
    DEFAULT_SYMBOL,
    HISTORY_SIZE_ENV,
    LOG_LEVEL_ENV,
    SYMBOL_ENV,
    ConsoleConfig,
    load_envs,
)
from frame_console.toggle import KeyCode

# Global factory function - set by create_app()
_console_factory: Optional[Callable[[ConsoleApp, str], ReplConsole]] = None


@dataclass(frozen=True)
class LogCommand:
    """Prints given arguments to the console."""

    msg: str
    num: Optional[int] = None


def _log_args(
    msg: Annotated[str, typer.Argument(help="Message to print")],
    num: Annotated[
        Optional[int], typer.Argument(help="Number of times to print message")
    ] = None,
) -> LogCommand:
    """Prints given arguments to the console."""
    return LogCommand(msg, num)


def log_command(log: ConsoleCommand[LogCommand]) -> None:
    match log.take():
        case LogCommand(msg=msg, num=num):
            for _ in range(num if num is not None else 1):
                log.reply(msg)
            log.ok()
        case _:
            pass


def build_console_app(config: ConsoleConfig) -> ConsoleApp:
    """Create a console with the built-in commands and the `log` demo command."""
    app = ConsoleApp(config)
    add_builtin_commands(app)
    app.add_console_command(TyperParser("log", _log_args), log_command)
    return app


def default_console_factory(app: ConsoleApp, toggle_key: str) -> ReplConsole:
    """Default factory for creating ReplConsole instances."""
    return ReplConsole(app, toggle_key=toggle_key)


def main(
    history_size: Annotated[
        int,
        typer.Option(
            envvar=HISTORY_SIZE_ENV, min=1, help="Number of commands kept in history"
        ),
    ] = DEFAULT_HISTORY_SIZE,
    symbol: Annotated[
        str, typer.Option(envvar=SYMBOL_ENV, help="Prefix echoed before each command")
    ] = DEFAULT_SYMBOL,
    toggle_key: Annotated[
        str, typer.Option("--toggle-key", help="Key that opens and closes the console")
    ] = "f12",
    log_level: Annotated[
        str, typer.Option(envvar=LOG_LEVEL_ENV, help="Log level for the log file")
    ] = "INFO",
    closed: Annotated[
        bool, typer.Option("--closed", help="Start with the console closed")
    ] = False,
) -> None:
    """FRAME CONSOLE - interactive developer console"""
    setup_logging(log_level.upper())
    logger = logging.getLogger(__name__)

    config = ConsoleConfig(
        keys=[KeyCode(toggle_key)], history_size=history_size, symbol=symbol
    )
    app = build_console_app(config)
    app.open.open = not closed

    logger.info(
        f"Starting console with commands {app.registry.names()} "
        f"(history size {config.history_size})"
    )

    try:
        factory = _console_factory or default_console_factory
        console = factory(app, toggle_key)
        asyncio.run(console.run())
    except KeyboardInterrupt:
        print("\nExiting...")


def create_app(
    console_factory: Optional[Callable[[ConsoleApp, str], ReplConsole]] = None,
) -> typer.Typer:
    """
    Create and configure the Typer application.

    Args:
        console_factory: Factory function to create the terminal host

    Returns:
        Typer application
    """
    # Load console settings from .env if not already set in the environment
    load_envs()

    global _console_factory
    _console_factory = console_factory

    app = typer.Typer(rich_markup_mode=None, add_completion=False)
    app.command()(main)
    return app


# Create default app instance for the console script entry point
app = create_app()


if __name__ == "__main__":
    app()
