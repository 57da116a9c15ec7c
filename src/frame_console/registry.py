"""
Registry of console commands, keyed by command name.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from frame_console.parser import ArgumentParser
from frame_console.runtime_config import ConsoleConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandSpec:
    """Definition of a console command: name, argument parser and description."""

    name: str
    parser: ArgumentParser[Any]
    help: str = ""


@dataclass
class CommandRegistry:
    """Name-ordered mapping of registered commands plus the console configuration."""

    config: ConsoleConfig = field(default_factory=ConsoleConfig)
    _commands: Dict[str, CommandSpec] = field(default_factory=dict, init=False)

    def register(self, name: str, parser: ArgumentParser[Any], help: str = "") -> None:
        """Register a command, overwriting (with a warning) any command of the same name."""
        if name in self._commands:
            logger.warning(
                "console command '%s' already registered and was overwritten", name
            )
        self._commands[name] = CommandSpec(name=name, parser=parser, help=help)

    def lookup(self, name: str) -> Optional[CommandSpec]:
        return self._commands.get(name)

    def names(self) -> List[str]:
        return sorted(self._commands)

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[CommandSpec]:
        for name in self.names():
            yield self._commands[name]
