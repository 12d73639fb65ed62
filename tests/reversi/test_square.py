"""Unit tests for /src/reversi/square.py"""

import pytest

from src.reversi.square import BOARD_DIMENSIONS, Square, all_squares


@pytest.mark.parametrize(
    "name, row, col",
    [("a1", 0, 0), ("h8", 7, 7), ("d3", 2, 3), ("h1", 0, 7), ("a8", 7, 0), ("E6", 5, 4)],
)
def test_from_algebraic(name: str, row: int, col: int) -> None:
    """The letter is the column, the number the row (both converted to zero-based)"""
    assert Square.from_algebraic(name) == Square(row, col)


def test_to_algebraic_roundtrip() -> None:
    for square in all_squares():
        assert Square.from_algebraic(square.to_algebraic()) == square


@pytest.mark.parametrize(
    "square, expected",
    [
        (Square(0, 0), True),
        (Square(7, 7), True),
        (Square(-1, 0), False),
        (Square(0, -1), False),
        (Square(8, 3), False),
        (Square(3, 8), False),
    ],
)
def test_is_within_bounds(square: Square, expected: bool) -> None:
    assert square.is_within_bounds() == expected


def test_shifted() -> None:
    assert Square(3, 3).shifted((-1, 1)) == Square(2, 4)
    assert Square(0, 0).shifted((-1, -1)) == Square(-1, -1)


def test_all_squares_in_row_major_order() -> None:
    squares = all_squares()
    assert len(squares) == BOARD_DIMENSIONS[0] * BOARD_DIMENSIONS[1]
    assert squares[0] == Square(0, 0)
    assert squares[1] == Square(0, 1)
    assert squares[8] == Square(1, 0)
    assert squares[-1] == Square(7, 7)


def test_square_is_hashable() -> None:
    """Squares are used as keys of the board position"""
    assert len({Square(1, 2), Square(1, 2), Square(2, 1)}) == 2
