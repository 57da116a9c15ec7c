"""
Turn a submitted console line into a CommandEntered event.
"""

import logging
from typing import Optional

from frame_console.events import CommandEntered, EventWriter, PrintLine
from frame_console.registry import CommandRegistry
from frame_console.state import ConsoleState
from frame_console.tokenizer import tokenize

logger = logging.getLogger(__name__)

INVALID_COMMAND = "error: Invalid command"


def submit_line(
    line: str,
    state: ConsoleState,
    registry: CommandRegistry,
    command_entered: EventWriter[CommandEntered],
    console_line: EventWriter[PrintLine],
) -> Optional[CommandEntered]:
    """Echo and record ``line``, then dispatch it to the registered command it names.

    Returns the emitted event, or None when nothing was dispatched.
    """
    if not line.strip():
        state.append_scrollback("")
        return None

    state.append_scrollback(f"{registry.config.symbol}{line}")
    state.push_history(line, registry.config.history_size)

    args = list(tokenize(line))
    if not args:
        return None

    command_name = args.pop(0)
    logger.debug("Command entered: `%s`, with args: `%r`", command_name, args)

    if registry.lookup(command_name) is None:
        logger.debug(
            "Command not recognized, recognized commands: `%r`", registry.names()
        )
        console_line.send(PrintLine.new(INVALID_COMMAND))
        return None

    event = CommandEntered(command_name=command_name, args=args)
    command_entered.send(event)
    return event
