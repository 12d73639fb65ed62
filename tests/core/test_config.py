"""Unit tests for src/core/config.py"""

from typing import Generator
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.core.config import (
    LOG_FORMAT,
    EngineSettings,
    LoggingSettings,
    ReversiConfig,
    configure_logging,
    get_config,
    reset_config,
)
from src.core.shared_types import Difficulty


@pytest.fixture(autouse=True)
def fresh_config() -> Generator[None, None, None]:
    reset_config()
    yield
    reset_config()


def test_defaults() -> None:
    config = ReversiConfig()
    assert config.engine.default_difficulty == Difficulty.ADVANCED
    assert config.engine.seed is None
    assert config.logging.log_level == "INFO"


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REVERSI_DIFFICULTY", "basic")
    monkeypatch.setenv("REVERSI_SEED", "42")
    monkeypatch.setenv("REVERSI_LOG_LEVEL", "debug")

    config = ReversiConfig.from_env()

    assert config.engine.default_difficulty == Difficulty.BASIC
    assert config.engine.seed == 42
    assert config.logging.log_level == "DEBUG"


def test_from_env_invalid_difficulty(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REVERSI_DIFFICULTY", "grandmaster")
    with pytest.raises(ValidationError):
        _ = ReversiConfig.from_env()


def test_invalid_log_level() -> None:
    with pytest.raises(ValidationError):
        _ = LoggingSettings(log_level="LOUD")


def test_get_config_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REVERSI_SEED", "1")
    config = get_config()
    monkeypatch.setenv("REVERSI_SEED", "2")
    assert get_config() is config
    assert config.engine.seed == 1

    reset_config()
    assert get_config().engine.seed == 2


def test_configure_logging() -> None:
    config = ReversiConfig(engine=EngineSettings(), logging=LoggingSettings(log_level="warning"))
    with patch("src.core.config.logging.basicConfig") as mock_basic_config:
        configure_logging(config)
    mock_basic_config.assert_called_once_with(level="WARNING", format=LOG_FORMAT, force=True)
