"""
A square (cell) on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Reversi is played on 8x8. (rows, cols)
BOARD_DIMENSIONS = (8, 8)

Vector = tuple[int, int]


@dataclass(frozen=True)
class Square:
    """Zero-based coordinates. Row 0 is the top row, col 0 the left-most column."""

    row: int
    col: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a1' - 'h8' get converted to (row=0, col=0) - (row=7, col=7). The letter names the column."""
        col = ord(sq[0].lower()) - ord("a")
        row = int(sq[1:]) - 1
        return cls(row, col)

    def to_algebraic(self) -> str:
        return f"{chr(self.col + ord('a'))}{self.row + 1}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[0]) and (
            0 <= self.col < BOARD_DIMENSIONS[1]
        )

    def shifted(self, direction: Vector) -> Square:
        """The neighbouring square along the direction (might fall off the board, check with is_within_bounds())"""
        dr, dc = direction
        return Square(self.row + dr, self.col + dc)


def all_squares() -> list[Square]:
    """Every square, in row-major order"""
    return [
        Square(row, col)
        for row in range(BOARD_DIMENSIONS[0])
        for col in range(BOARD_DIMENSIONS[1])
    ]
