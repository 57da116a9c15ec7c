"""
Decide whether raw keyboard input should open or close the console.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Union


class ButtonState(str, Enum):
    """Press state reported by the host for a key event."""

    pressed = "pressed"
    released = "released"


@dataclass(frozen=True)
class KeyCode:
    """Toggle key matched by the host's key identifier (e.g. "grave", "f12")."""

    code: str


@dataclass(frozen=True)
class ScanCode:
    """Toggle key matched by raw scan code."""

    code: int


ToggleConsoleKey = Union[KeyCode, ScanCode]


@dataclass(frozen=True)
class KeyboardInput:
    """A single raw keyboard event delivered by the host."""

    key_code: Optional[str]
    scan_code: int
    state: ButtonState = ButtonState.pressed

    @property
    def is_pressed(self) -> bool:
        return self.state == ButtonState.pressed


def console_key_pressed(
    keyboard_input: KeyboardInput, configured_keys: Iterable[ToggleConsoleKey]
) -> bool:
    """Return True if the event is a press of any configured toggle key."""
    if not keyboard_input.is_pressed:
        return False

    for configured_key in configured_keys:
        match configured_key:
            case KeyCode(code=code):
                if keyboard_input.key_code == code:
                    return True
            case ScanCode(code=code):
                if keyboard_input.scan_code == code:
                    return True

    return False
