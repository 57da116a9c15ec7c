import os
from pathlib import Path

import pytest

from frame_console.runtime_config import (
    HISTORY_SIZE_ENV,
    LOG_LEVEL_ENV,
    SYMBOL_ENV,
    ConsoleConfig,
    get_data_dir,
    load_envs,
)
from frame_console.toggle import KeyCode


def test_console_config_defaults() -> None:
    config = ConsoleConfig()
    assert config.keys == [KeyCode("grave")]
    assert config.left_pos == 0.0
    assert config.top_pos == 0.0
    assert config.height == 400.0
    assert config.width == 800.0
    assert config.history_size == 50
    assert config.symbol == "> "


@pytest.mark.parametrize("history_size", [0, -1])
def test_console_config_rejects_empty_history(history_size: int) -> None:
    with pytest.raises(ValueError):
        ConsoleConfig(history_size=history_size)


def test_console_config_is_frozen() -> None:
    config = ConsoleConfig()
    with pytest.raises(AttributeError):
        config.history_size = 10  # type: ignore[misc]


def test_load_envs_reads_dotenv_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    for key in (HISTORY_SIZE_ENV, SYMBOL_ENV, LOG_LEVEL_ENV):
        monkeypatch.delenv(key, raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text(f"{HISTORY_SIZE_ENV}=7\n{SYMBOL_ENV}=$\n")

    load_envs(str(env_file))

    assert os.environ[HISTORY_SIZE_ENV] == "7"
    assert os.environ[SYMBOL_ENV] == "$"
    assert LOG_LEVEL_ENV not in os.environ


def test_load_envs_does_not_override_existing(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv(HISTORY_SIZE_ENV, "3")
    env_file = tmp_path / ".env"
    env_file.write_text(f"{HISTORY_SIZE_ENV}=7\n")

    load_envs(str(env_file))

    assert os.environ[HISTORY_SIZE_ENV] == "3"


def test_get_data_dir_uses_xdg(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    assert get_data_dir() == tmp_path / "frame_console"


def test_get_data_dir_falls_back_to_home(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    assert get_data_dir() == tmp_path / ".local/share" / "frame_console"
