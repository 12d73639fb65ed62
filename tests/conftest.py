"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

import random
from typing import Callable

import pytest

from src.core.config import EngineSettings, ReversiConfig
from src.core.shared_types import Difficulty
from src.db.memory_repository import InMemoryGameRepository
from src.services.reversi_service import ReversiService

EMPTY_ROW = "........"


@pytest.fixture
def board_text() -> Callable[[dict[str, str]], str]:
    """Call the inner function with a mapping {square name: 'B' | 'W'}, to get the text notation of a board with only those discs."""

    def _create_board_text(discs: dict[str, str]) -> str:
        rows = [list(EMPTY_ROW) for _ in range(8)]
        for square_name, character in discs.items():
            col = ord(square_name[0]) - ord("a")
            row = int(square_name[1]) - 1
            rows[row][col] = character
        return "/".join("".join(row) for row in rows)

    return _create_board_text


@pytest.fixture
def repository() -> InMemoryGameRepository:
    """Fresh session storage for every test"""
    return InMemoryGameRepository()


@pytest.fixture
def config() -> ReversiConfig:
    return ReversiConfig(engine=EngineSettings(default_difficulty=Difficulty.ADVANCED, seed=7))


@pytest.fixture
def service(repository: InMemoryGameRepository, config: ReversiConfig) -> ReversiService:
    """Service with a seeded RNG, so the computer's choices are reproducible"""
    return ReversiService(repository, config=config, rng=random.Random(7))
