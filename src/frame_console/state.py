"""
Session state for the console: edit buffer, scrollback and history ring.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Union

from rich.text import Text


@dataclass
class ConsoleOpen:
    """Whether the console is currently shown."""

    open: bool = False


def _initial_history() -> Deque[str]:
    # Slot 0 is scratch space for the in-progress edit while browsing history
    return deque([""])


@dataclass
class ConsoleState:
    """Holds the edit buffer, scrollback and submitted-line history."""

    buf: str = ""
    cursor: int = 0
    scrollback: List[Text] = field(default_factory=list)
    history: Deque[str] = field(default_factory=_initial_history)
    history_index: int = 0

    def set_buffer(self, text: str) -> None:
        """Replace the edit buffer and move the cursor to the end of it."""
        self.buf = text
        self.cursor = len(text)

    def clear_buffer(self) -> None:
        self.set_buffer("")

    def append_scrollback(self, line: Union[str, Text]) -> None:
        self.scrollback.append(line if isinstance(line, Text) else Text(line))

    def clear_scrollback(self) -> None:
        self.scrollback.clear()

    def scrollback_lines(self) -> List[str]:
        """Scrollback as plain strings, without styling."""
        return [line.plain for line in self.scrollback]

    def push_history(self, line: str, history_size: int) -> None:
        """Record a submitted line, evicting the oldest entries past ``history_size``."""
        self.history.insert(1, line)
        while len(self.history) > history_size + 1:
            self.history.pop()
        self.history_index = 0

    def history_entries(self) -> List[str]:
        """Submitted lines, newest first, without the scratch slot."""
        return list(self.history)[1:]

    def history_up(self) -> bool:
        """Load the next older history entry into the buffer; returns False at the oldest."""
        if len(self.history) <= 1 or self.history_index >= len(self.history) - 1:
            return False

        if self.history_index == 0 and self.buf.strip():
            self.history[0] = self.buf

        self.history_index += 1
        self.set_buffer(self.history[self.history_index])
        return True

    def history_down(self) -> bool:
        """Load the next newer history entry (or the scratch slot); returns False at slot 0."""
        if self.history_index <= 0:
            return False

        self.history_index -= 1
        self.set_buffer(self.history[self.history_index])
        return True
