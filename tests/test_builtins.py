from frame_console.app import ConsoleApp


def test_help_lists_commands_sorted(console_app: ConsoleApp) -> None:
    console_app.submit("help")
    lines = console_app.state.scrollback_lines()

    assert lines[0] == "> help"
    assert lines[1].splitlines() == [
        "Available commands:",
        "  clear - Clear the console scrollback",
        "  exit - Exit the application",
        "  help - Show available commands",
        "  log - Prints given arguments to the console.",
    ]
    assert lines[2] == "[ok]"


def test_help_for_single_command_shows_usage(console_app: ConsoleApp) -> None:
    console_app.submit("help log")
    lines = console_app.state.scrollback_lines()
    assert lines[1].splitlines() == [
        "Usage: log [OPTIONS] MSG [NUM]",
        "",
        "  Prints given arguments to the console.",
        "",
        "Arguments:",
        "  MSG  Message to print  [required]",
        "  NUM  Number of times to print message",
    ]
    assert lines[-1] == "[ok]"


def test_help_for_unknown_command_fails(console_app: ConsoleApp) -> None:
    console_app.submit("help nope")
    assert console_app.state.scrollback_lines()[1:] == [
        "error: Unknown command `nope`",
        "[failed]",
    ]


def test_clear_empties_scrollback(console_app: ConsoleApp) -> None:
    console_app.submit("log hello")
    console_app.submit("clear")
    assert console_app.state.scrollback == []
    assert console_app.state.history_entries() == ["clear", "log hello"]


def test_clear_rejects_arguments(console_app: ConsoleApp) -> None:
    console_app.submit("clear everything")
    lines = console_app.state.scrollback_lines()
    assert lines[0] == "> clear everything"
    assert lines[1].startswith("error: Got unexpected extra argument")


def test_exit_requests_exit(console_app: ConsoleApp) -> None:
    assert not console_app.exit_requested
    console_app.submit("exit")
    assert console_app.exit_requested
