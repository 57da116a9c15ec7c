"""
Per-pass event channels shared between the dispatcher, command handlers and the scrollback.

Events are double buffered: anything sent during a pass stays readable for that
pass and the next one, then it is dropped on the following ``update()``. Each
reader keeps its own cursor so every reader sees every event at most once, in
the order it was sent.
"""

from dataclasses import dataclass, field
from typing import Generic, Iterator, List, TypeVar, Union

from rich.text import Text

T = TypeVar("T")


@dataclass
class CommandEntered:
    """Parsed raw console command split into ``command_name`` and ``args``."""

    command_name: str
    args: List[str] = field(default_factory=list)


@dataclass
class PrintLine:
    """A line to print in the console scrollback."""

    line: Text

    @classmethod
    def new(cls, line: Union[str, Text]) -> "PrintLine":
        return cls(line if isinstance(line, Text) else Text(line))


class Events(Generic[T]):
    """Ordered multi-producer, multi-reader event queue drained once per pass."""

    def __init__(self) -> None:
        # (sequence number, event) pairs for the previous and the current pass
        self._previous: List[tuple[int, T]] = []
        self._current: List[tuple[int, T]] = []
        self._event_count = 0

    def send(self, event: T) -> None:
        self._current.append((self._event_count, event))
        self._event_count += 1

    def update(self) -> None:
        """Rotate buffers at the start of a pass, dropping events two passes old."""
        self._previous = self._current
        self._current = []

    def reader(self) -> "EventReader[T]":
        """Return a reader that starts at the oldest event still buffered."""
        return EventReader(self)

    def _buffered(self) -> Iterator[tuple[int, T]]:
        yield from self._previous
        yield from self._current

    def __len__(self) -> int:
        return len(self._previous) + len(self._current)

    @property
    def event_count(self) -> int:
        """Total number of events ever sent."""
        return self._event_count


class EventReader(Generic[T]):
    """Cursor over an ``Events`` channel; each event is yielded once per reader."""

    def __init__(self, events: Events[T]) -> None:
        self._events = events
        self._last_event_count = 0

    def __iter__(self) -> Iterator[T]:
        for seq, event in list(self._events._buffered()):
            if seq < self._last_event_count:
                continue
            # Advance before yielding so an early break leaves later events unread
            self._last_event_count = seq + 1
            yield event

    def read(self) -> List[T]:
        return list(self)

    def is_empty(self) -> bool:
        return all(seq < self._last_event_count for seq, _ in self._events._buffered())


class EventWriter(Generic[T]):
    """Write-only handle on an ``Events`` channel."""

    def __init__(self, events: Events[T]) -> None:
        self._events = events

    def send(self, event: T) -> None:
        self._events.send(event)
