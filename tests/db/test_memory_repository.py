"""Unit tests for src/db/memory_repository.py"""

from uuid import UUID, uuid4

import pytest

from src.core.models import GameModel
from src.db.memory_repository import InMemoryGameRepository

STARTING_BOARD = "......../......../......../...WB.../...BW.../......../......../........"


@pytest.fixture
def sample_game() -> GameModel:
    return GameModel(
        board=STARTING_BOARD,
        color_to_move="black",
        status="in_progress",
        difficulty="advanced",
        move_history=[],
    )


def test_create_and_get_game(repository: InMemoryGameRepository, sample_game: GameModel) -> None:
    stored, game_id = repository.create_game(sample_game)

    assert isinstance(game_id, UUID)
    assert stored == sample_game
    assert repository.get_game(game_id) == sample_game
    assert len(repository) == 1


def test_get_unknown_game(repository: InMemoryGameRepository) -> None:
    assert repository.get_game(uuid4()) is None


def test_records_are_copies(repository: InMemoryGameRepository, sample_game: GameModel) -> None:
    """Changing a model after storing / retrieving it does not change the stored record"""
    _, game_id = repository.create_game(sample_game)
    sample_game.move_history.append("d3")

    retrieved = repository.get_game(game_id)
    assert retrieved is not None
    assert retrieved.move_history == []

    retrieved.move_history.append("c4")
    assert repository.get_game(game_id).move_history == []  # type: ignore[union-attr]


def test_update_game(repository: InMemoryGameRepository, sample_game: GameModel) -> None:
    _, game_id = repository.create_game(sample_game)
    updated = GameModel(
        board=STARTING_BOARD,
        color_to_move="white",
        status="in_progress",
        difficulty="basic",
        move_history=["d3"],
    )

    assert repository.update_game(game_id, updated) == updated
    assert repository.get_game(game_id) == updated


def test_update_unknown_game(repository: InMemoryGameRepository, sample_game: GameModel) -> None:
    assert repository.update_game(uuid4(), sample_game) is None
    assert len(repository) == 0


def test_delete_game(repository: InMemoryGameRepository, sample_game: GameModel) -> None:
    _, game_id = repository.create_game(sample_game)

    assert repository.delete_game(game_id) == sample_game
    assert repository.get_game(game_id) is None
    assert repository.delete_game(game_id) is None
