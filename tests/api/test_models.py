from uuid import UUID, uuid4

import pytest

from src.api.models import AttemptMoveRequest, NewGameRequest, OpponentMoveRequest
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, Difficulty

STARTING_BOARD = "......../......../......../...WB.../...BW.../......../......../........"


@pytest.fixture
def mock_id() -> UUID:
    return uuid4()


# -- Validation - NewGameRequest --
def test_new_game_defaults() -> None:
    request = NewGameRequest()
    assert request.difficulty is None
    assert request.starting_board is None
    assert request.color_to_move == Color.BLACK


def test_valid_starting_board() -> None:
    request = NewGameRequest(starting_board=f"  {STARTING_BOARD} ", difficulty="basic")
    assert request.starting_board == STARTING_BOARD
    assert request.difficulty == Difficulty.BASIC


@pytest.mark.parametrize(
    "invalid_board",
    [
        "/".join(["........"] * 7),  # only 7 rows
        "/".join(["........"] * 8 + ["........"]),  # 9 rows
        "/".join([".........", *["........"] * 7]),  # row of 9 squares
        "/".join(["...X....", *["........"] * 7]),  # unknown square
    ],
)
def test_invalid_starting_board(invalid_board: str) -> None:
    with pytest.raises(InvalidRequestError):
        _ = NewGameRequest(starting_board=invalid_board)


# -- Validation - AttemptMoveRequest --
def test_valid_coordinates(mock_id: UUID) -> None:
    request = AttemptMoveRequest(game_id=mock_id, row=0, col=7)
    assert (request.row, request.col) == (0, 7)
    assert request.square is None


@pytest.mark.parametrize("square", ["a1", "h8", "D3"])
def test_valid_square_names(mock_id: UUID, square: str) -> None:
    request = AttemptMoveRequest(game_id=mock_id, square=square)
    assert request.square == square


@pytest.mark.parametrize("row, col", [(-1, 0), (0, 8), (8, 8)])
def test_coordinates_out_of_range(mock_id: UUID, row: int, col: int) -> None:
    with pytest.raises(InvalidRequestError):
        _ = AttemptMoveRequest(game_id=mock_id, row=row, col=col)


@pytest.mark.parametrize("square", ["i1", "a9", "a0", "e", "e44", "33"])
def test_invalid_square_names(mock_id: UUID, square: str) -> None:
    with pytest.raises(InvalidRequestError):
        _ = AttemptMoveRequest(game_id=mock_id, square=square)


@pytest.mark.parametrize(
    "target",
    [
        {},  # nothing
        {"row": 1},  # column missing
        {"row": 2, "col": 3, "square": "d3"},  # both
    ],
)
def test_either_coordinates_or_square(mock_id: UUID, target: dict) -> None:
    with pytest.raises(InvalidRequestError):
        _ = AttemptMoveRequest(game_id=mock_id, **target)


# -- Validation - OpponentMoveRequest --
def test_opponent_request_difficulty(mock_id: UUID) -> None:
    assert OpponentMoveRequest(game_id=mock_id).difficulty is None
    assert OpponentMoveRequest(game_id=mock_id, difficulty="advanced").difficulty == Difficulty.ADVANCED
