from typing import Any, List, Sequence

import pytest

from frame_console.app import ConsoleApp
from frame_console.builtins import add_builtin_commands
from frame_console.cli import _log_args, log_command
from frame_console.parser import TyperParser
from frame_console.runtime_config import ConsoleConfig


class StubParser:
    """Parser that accepts any arguments and returns them as a list."""

    def __init__(self, name: str, help: str = "") -> None:
        self.name = name
        self.help = help

    def parse(self, args: Sequence[str]) -> List[str]:
        return list(args)

    def render_help(self) -> str:
        return f"Usage: {self.name}"


class MockConsole:
    """Mock terminal host for testing."""

    def __init__(self, app: ConsoleApp, toggle_key: str) -> None:
        self.app = app
        self.toggle_key = toggle_key
        self.run_called = False

    async def run(self) -> None:
        self.run_called = True


def make_app(**config: Any) -> ConsoleApp:
    """Open console with the built-ins and the `log` command registered."""
    app = ConsoleApp(ConsoleConfig(**config))
    add_builtin_commands(app)
    app.add_console_command(TyperParser("log", _log_args), log_command)
    app.open.open = True
    return app


@pytest.fixture
def console_app() -> ConsoleApp:
    return make_app()


@pytest.fixture
def mock_consoles() -> list[MockConsole]:
    """Track created mock consoles."""
    return []


