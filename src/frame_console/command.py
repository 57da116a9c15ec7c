"""
Handler-side view of console commands.

``ConsoleCommand`` is handed to a command handler once per pass. It holds at
most one parsed invocation of that handler's command and a writer for reply
lines::

    def log_command(log: ConsoleCommand[LogArgs]) -> None:
        match log.take():
            case LogArgs(msg=msg, num=num):
                for _ in range(num or 1):
                    log.reply(msg)
                log.ok()
            case _:
                pass
"""

import logging
from typing import Any, Callable, Generic, Optional, TypeVar, Union

from rich.text import Text

from frame_console.errors import ArgumentParseError
from frame_console.events import CommandEntered, EventReader, EventWriter, PrintLine
from frame_console.parser import ArgumentParser

logger = logging.getLogger(__name__)

T = TypeVar("T")

OK_MARKER = "[ok]"
FAILED_MARKER = "[failed]"


class ConsoleCommand(Generic[T]):
    """One pass worth of a command: its parsed arguments and a reply channel."""

    def __init__(
        self,
        command: Optional[Union[T, ArgumentParseError]],
        console_line: EventWriter[PrintLine],
    ) -> None:
        self._command = command
        self._console_line = console_line

    @classmethod
    def from_events(
        cls,
        parser: ArgumentParser[T],
        reader: EventReader[CommandEntered],
        console_line: EventWriter[PrintLine],
    ) -> "ConsoleCommand[T]":
        """Read up to the first event addressed to ``parser.name`` and parse its args."""
        command: Optional[Union[T, ArgumentParseError]] = None
        for entered in reader:
            if entered.command_name != parser.name:
                continue
            try:
                command = parser.parse(entered.args)
                logger.debug(
                    "Parsed `%s` with args %r: %r",
                    entered.command_name,
                    entered.args,
                    command,
                )
            except ArgumentParseError as err:
                console_line.send(PrintLine.new(err.rendered))
                command = err
            break
        return cls(command, console_line)

    def take(self) -> Optional[Union[T, ArgumentParseError]]:
        """Return the parsed command (or its parse error) once.

        Consecutive calls return None regardless of whether the command was entered.
        """
        command, self._command = self._command, None
        return command

    def ok(self) -> None:
        """Print `[ok]` in the console."""
        self._console_line.send(PrintLine.new(OK_MARKER))

    def failed(self) -> None:
        """Print `[failed]` in the console."""
        self._console_line.send(PrintLine.new(FAILED_MARKER))

    def reply(self, msg: Union[str, Text]) -> None:
        """Print a reply in the console."""
        self._console_line.send(PrintLine.new(msg))

    def reply_ok(self, msg: Union[str, Text]) -> None:
        """Print a reply in the console followed by `[ok]`."""
        self.reply(msg)
        self.ok()

    def reply_failed(self, msg: Union[str, Text]) -> None:
        """Print a reply in the console followed by `[failed]`."""
        self.reply(msg)
        self.failed()


CommandHandler = Callable[[ConsoleCommand[Any]], None]
