"""Defines what can be on a square"""

from enum import Enum, auto
from typing import Self


class Disc(Enum):
    EMPTY = auto()
    BLACK = auto()
    WHITE = auto()

    @classmethod
    def from_text(cls, character: str) -> Self:
        return TEXT_TO_DISC[character.upper()]

    def to_text(self) -> str:
        return DISC_TO_TEXT[self]

    def opponent(self) -> "Disc":
        """There is exactly one other player. An empty square has no opponent."""
        if self == Disc.EMPTY:
            raise ValueError("An empty square has no opponent.")
        return Disc.WHITE if self == Disc.BLACK else Disc.BLACK


# Black moves first.
FIRST_TO_MOVE = Disc.BLACK

PLAYERS: tuple[Disc, Disc] = (Disc.BLACK, Disc.WHITE)

TEXT_TO_DISC: dict[str, Disc] = {
    "B": Disc.BLACK,
    "W": Disc.WHITE,
    ".": Disc.EMPTY,
}

DISC_TO_TEXT: dict[Disc, str] = {value: key for key, value in TEXT_TO_DISC.items()}

AVAILABLE_COLOR_NAMES = [disc.name for disc in PLAYERS]
