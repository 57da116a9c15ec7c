"""
Embeddable developer console: command registry, dispatch and session state.
"""

from frame_console.app import ConsoleApp, FrameInput
from frame_console.builtins import add_builtin_commands
from frame_console.command import ConsoleCommand
from frame_console.errors import ArgumentParseError, ConsoleError
from frame_console.events import CommandEntered, PrintLine
from frame_console.parser import ArgumentParser, TyperParser
from frame_console.registry import CommandRegistry, CommandSpec
from frame_console.runtime_config import ConsoleConfig
from frame_console.state import ConsoleOpen, ConsoleState
from frame_console.toggle import (
    ButtonState,
    KeyboardInput,
    KeyCode,
    ScanCode,
    console_key_pressed,
)
from frame_console.tokenizer import tokenize

__all__ = [
    "ArgumentParseError",
    "ArgumentParser",
    "ButtonState",
    "CommandEntered",
    "CommandRegistry",
    "CommandSpec",
    "ConsoleApp",
    "ConsoleCommand",
    "ConsoleConfig",
    "ConsoleError",
    "ConsoleOpen",
    "ConsoleState",
    "FrameInput",
    "KeyCode",
    "KeyboardInput",
    "PrintLine",
    "ScanCode",
    "TyperParser",
    "add_builtin_commands",
    "console_key_pressed",
    "tokenize",
]
