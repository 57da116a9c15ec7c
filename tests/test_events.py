from rich.text import Text

from frame_console.events import CommandEntered, Events, EventWriter, PrintLine


def test_reader_sees_each_event_once_in_order() -> None:
    events: Events[int] = Events()
    reader = events.reader()
    events.send(1)
    events.send(2)
    assert reader.read() == [1, 2]
    assert reader.read() == []
    events.send(3)
    assert reader.read() == [3]


def test_readers_are_independent() -> None:
    events: Events[str] = Events()
    first = events.reader()
    second = events.reader()
    events.send("a")
    assert first.read() == ["a"]
    assert second.read() == ["a"]


def test_events_survive_one_update_and_drop_after_two() -> None:
    events: Events[str] = Events()
    events.send("a")
    events.update()
    assert events.reader().read() == ["a"]
    events.update()
    assert events.reader().read() == []
    assert len(events) == 0
    assert events.event_count == 1


def test_breaking_early_leaves_later_events_unread() -> None:
    events: Events[int] = Events()
    reader = events.reader()
    for n in (1, 2, 3):
        events.send(n)
    for n in reader:
        if n == 2:
            break
    assert not reader.is_empty()
    assert reader.read() == [3]
    assert reader.is_empty()


def test_event_writer_sends_into_channel() -> None:
    events: Events[CommandEntered] = Events()
    reader = events.reader()
    EventWriter(events).send(CommandEntered("log", ["x"]))
    assert reader.read() == [CommandEntered(command_name="log", args=["x"])]


def test_print_line_wraps_plain_strings() -> None:
    assert PrintLine.new("hi").line == Text("hi")
    styled = Text("oops", style="bold red")
    assert PrintLine.new(styled).line is styled
