"""
Runtime configuration for the frame console.

This module provides:
- load_envs(): load FRAME_CONSOLE_* settings from a .env file
  if they are not already present in the environment.
- ConsoleConfig: a dataclass holding toggle keys, window geometry,
  history capacity and the prompt symbol.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import dotenv_values

from frame_console.toggle import KeyCode, ToggleConsoleKey

# Environment variable names for console settings
HISTORY_SIZE_ENV: str = "FRAME_CONSOLE_HISTORY_SIZE"
SYMBOL_ENV: str = "FRAME_CONSOLE_SYMBOL"
LOG_LEVEL_ENV: str = "FRAME_CONSOLE_LOG_LEVEL"

DEFAULT_HISTORY_SIZE: int = 50
DEFAULT_SYMBOL: str = "> "


def load_envs(env_file: Optional[str] = None) -> None:
    """
    Load FRAME_CONSOLE_HISTORY_SIZE, FRAME_CONSOLE_SYMBOL and FRAME_CONSOLE_LOG_LEVEL
    from a .env file into the process environment if they are not already set.
    """
    env_values = dotenv_values(env_file) if env_file else dotenv_values()
    for key in (HISTORY_SIZE_ENV, SYMBOL_ENV, LOG_LEVEL_ENV):
        if not os.environ.get(key):
            val = env_values.get(key)
            if val:
                os.environ[key] = str(val)


def _default_keys() -> list[ToggleConsoleKey]:
    return [KeyCode("grave")]


@dataclass(frozen=True)
class ConsoleConfig:
    """
    Holds configuration for the console.

    Attributes:
        keys: Keys (by key code or raw scan code) that toggle the console.
        left_pos: Left position of the console window.
        top_pos: Top position of the console window.
        height: Console window height.
        width: Console window width.
        history_size: Number of submitted lines kept in history.
        symbol: Prefix echoed in front of every submitted line.
    """

    keys: list[ToggleConsoleKey] = field(default_factory=_default_keys)
    left_pos: float = 0.0
    top_pos: float = 0.0
    height: float = 400.0
    width: float = 800.0
    history_size: int = DEFAULT_HISTORY_SIZE
    symbol: str = DEFAULT_SYMBOL

    def __post_init__(self) -> None:
        if self.history_size < 1:
            raise ValueError(
                f"history_size must be at least 1, got {self.history_size}"
            )


def get_data_dir() -> Path:
    """
    Return the frame console data directory under XDG_DATA_HOME or fallback to ~/.local/share.
    """
    data_home = Path(os.environ.get("XDG_DATA_HOME", Path.home() / ".local/share"))
    return data_home / "frame_console"
