"""The Game board holds the `position` (in reversi: which disc, if any, lies on every square) and applies moves to it"""

from dataclasses import dataclass
from typing import Self

from src.core.exceptions import GameStateError
from src.reversi.disc import PLAYERS, TEXT_TO_DISC, Disc
from src.reversi.moves import Move, legal_moves
from src.reversi.square import BOARD_DIMENSIONS, Square, all_squares

ROW_SEPARATOR = "/"

# Canonical opening: two discs each, placed diagonally in the centre.
STARTING_POSITION = (
    "......../"
    "......../"
    "......../"
    "...WB.../"
    "...BW.../"
    "......../"
    "......../"
    "........"
)


@dataclass
class Board:
    position: dict[Square, Disc]

    @classmethod
    def starting_position(cls) -> Self:
        return cls.from_text(STARTING_POSITION)

    @classmethod
    def empty(cls) -> Self:
        return cls({square: Disc.EMPTY for square in all_squares()})

    @classmethod
    def from_text(cls, text: str) -> Self:
        """Construct a board from its text notation.

        The rows are separated by slashes, read from the top row (row 0) down.
        Every row has one character per square: 'B' black disc, 'W' white disc, '.' empty square.
        ex. the starting position:
        ......../......../......../...WB.../...BW.../......../......../........
        """
        rows = text.strip().split(ROW_SEPARATOR)
        if len(rows) != BOARD_DIMENSIONS[0]:
            raise GameStateError(
                f"Board text must contain {BOARD_DIMENSIONS[0]} rows separated by {ROW_SEPARATOR!r}. Got {len(rows)}."
            )

        position: dict[Square, Disc] = {}
        for row_idx, text_one_row in enumerate(rows):
            if len(text_one_row) != BOARD_DIMENSIONS[1]:
                raise GameStateError(
                    f"Row {row_idx} must contain {BOARD_DIMENSIONS[1]} squares: {text_one_row!r}"
                )
            for col_idx, character in enumerate(text_one_row):
                if character.upper() not in TEXT_TO_DISC:
                    raise GameStateError(
                        f"Cannot interpret {character!r} as a square. Use one of {''.join(TEXT_TO_DISC)}"
                    )
                position[Square(row_idx, col_idx)] = Disc.from_text(character)
        return cls(position)

    def to_text(self) -> str:
        return ROW_SEPARATOR.join(self.rows())

    def rows(self) -> list[str]:
        """Text notation, one string per row"""
        return [
            "".join(
                self.disc(Square(row, col)).to_text()
                for col in range(BOARD_DIMENSIONS[1])
            )
            for row in range(BOARD_DIMENSIONS[0])
        ]

    def disc(self, square: Square) -> Disc:
        return self.position[square]

    def place_disc(self, disc: Disc, square: Square) -> None:
        """Overwrite a square. No legality checks at this level."""
        self.position[square] = disc

    def locate_color(self, disc: Disc) -> list[Square]:
        return [square for square, found in self.position.items() if found == disc]

    def empty_squares(self) -> list[Square]:
        return self.locate_color(Disc.EMPTY)

    def generate_legal_moves(self, disc: Disc) -> list[Move]:
        """Wraps around the rule engine in moves.py"""
        return legal_moves(self, disc)

    def apply_move(self, move: Move, disc: Disc) -> list[Square]:
        """
        Update the position on the board
        ---

        Place the new disc, then flip every captured disc.
        Returns the squares that changed in exactly that order.

        NOTE: No legality check. The move must have been generated for this disc on this (unchanged) board.
        """
        self.place_disc(disc, move.square)
        for square in move.captured:
            self.place_disc(disc, square)
        return [move.square, *move.captured]

    def count_discs(self) -> dict[Disc, int]:
        """Tally the discs each player has on the board"""
        return {player: len(self.locate_color(player)) for player in PLAYERS}

    def occupied_count(self) -> int:
        return sum(self.count_discs().values())
