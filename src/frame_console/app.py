"""
Per-pass driver for the console.

The host calls ``ConsoleApp.update`` once per frame with whatever input it
collected. Each pass runs in a fixed order: toggle handling, line editing and
submission, command handlers, then draining printed lines into the scrollback.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Union

from rich.text import Text

from frame_console.command import ConsoleCommand, CommandHandler
from frame_console.dispatch import submit_line
from frame_console.events import (
    CommandEntered,
    EventReader,
    Events,
    EventWriter,
    PrintLine,
)
from frame_console.parser import ArgumentParser
from frame_console.registry import CommandRegistry
from frame_console.runtime_config import ConsoleConfig
from frame_console.state import ConsoleOpen, ConsoleState
from frame_console.toggle import KeyboardInput, console_key_pressed

logger = logging.getLogger(__name__)

CLEAR_KEY = "l"


@dataclass
class FrameInput:
    """Input gathered by the host for a single pass.

    Attributes:
        keyboard: Raw keyboard events seen this pass.
        wants_keyboard_input: Whether another host widget currently owns keyboard focus.
        text: New contents of the edit buffer, if the user typed this pass.
        submit: Enter was pressed in the edit line.
        history_up: Arrow up was pressed in the edit line.
        history_down: Arrow down was pressed in the edit line.
        ctrl_held: A Control key is held down.
    """

    keyboard: List[KeyboardInput] = field(default_factory=list)
    wants_keyboard_input: bool = False
    text: Optional[str] = None
    submit: bool = False
    history_up: bool = False
    history_down: bool = False
    ctrl_held: bool = False


@dataclass
class _BoundHandler:
    parser: ArgumentParser[Any]
    handler: CommandHandler
    reader: EventReader[CommandEntered]


class ConsoleApp:
    """Owns the registry, session state and event channels of one console."""

    def __init__(self, config: Optional[ConsoleConfig] = None) -> None:
        self.registry = CommandRegistry(config or ConsoleConfig())
        self.state = ConsoleState()
        self.open = ConsoleOpen()
        self.command_entered: Events[CommandEntered] = Events()
        self.print_lines: Events[PrintLine] = Events()
        self.exit_requested = False
        self.frame = 0

        self._handlers: List[_BoundHandler] = []
        self._scrollback_reader = self.print_lines.reader()

    @property
    def config(self) -> ConsoleConfig:
        return self.registry.config

    def add_console_command(
        self,
        parser: ArgumentParser[Any],
        handler: CommandHandler,
        help: Optional[str] = None,
    ) -> "ConsoleApp":
        """Register a command and bind ``handler`` to run every pass with its events."""
        self.registry.register(
            parser.name, parser, help if help is not None else parser.help
        )
        self._handlers.append(
            _BoundHandler(parser, handler, self.command_entered.reader())
        )
        return self

    def print_line(self, line: Union[str, Text]) -> None:
        """Queue a line for the scrollback; it shows up at the end of the pass."""
        self.print_lines.send(PrintLine.new(line))

    def submit(self, line: str) -> None:
        """Run one pass that types ``line`` into the edit buffer and submits it."""
        self.update(FrameInput(text=line, submit=True))

    def update(self, frame: FrameInput) -> None:
        """Run a single pass."""
        self.command_entered.update()
        self.print_lines.update()
        self.frame += 1

        self._handle_toggle(frame)
        if self.open.open:
            self._handle_edit(frame)
        self._run_handlers()
        self._drain_output()

    def _handle_toggle(self, frame: FrameInput) -> None:
        pressed = any(
            console_key_pressed(event, self.config.keys) for event in frame.keyboard
        )
        # Always close if open; don't steal keys from another focused text input
        if pressed and (self.open.open or not frame.wants_keyboard_input):
            self.open.open = not self.open.open
            logger.debug("Console %s", "opened" if self.open.open else "closed")

    def _handle_edit(self, frame: FrameInput) -> None:
        state = self.state
        if frame.text is not None:
            state.set_buffer(frame.text)

        if frame.submit:
            submit_line(
                state.buf,
                state,
                self.registry,
                EventWriter(self.command_entered),
                EventWriter(self.print_lines),
            )
            state.clear_buffer()

        if frame.ctrl_held and any(
            event.is_pressed and event.key_code == CLEAR_KEY
            for event in frame.keyboard
        ):
            state.clear_scrollback()

        if frame.history_up:
            state.history_up()
        elif frame.history_down:
            state.history_down()

    def _run_handlers(self) -> None:
        writer = EventWriter(self.print_lines)
        for bound in self._handlers:
            try:
                # Parser callbacks run here too, so they share the handler funnel
                command: ConsoleCommand[Any] = ConsoleCommand.from_events(
                    bound.parser, bound.reader, writer
                )
                bound.handler(command)
            except Exception as e:
                logger.exception("Console command `%s` failed", bound.parser.name)
                writer.send(
                    PrintLine.new(
                        Text(f"error: {bound.parser.name} failed: {e}", style="bold red")
                    )
                )

    def _drain_output(self) -> None:
        for event in self._scrollback_reader:
            self.state.scrollback.append(event.line)
