"""
Capturing rules and legal move generation (the rule engine)

Key idea: use raycasting from the empty square outwards to find the runs of opponent discs that get captured.


Stateless: everything is recomputed from the board that gets passed in.
"""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from src.reversi.disc import Disc
from src.reversi.square import Square, Vector, all_squares

logger = logging.getLogger(__name__)


class Board(Protocol):
    """Just the parts the capturing rules need"""

    def disc(self, square: Square) -> Disc: ...


# NW, N, NE, W, E, SW, S, SE
DIRECTIONS: list[Vector] = [
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
]


@dataclass
class Move:
    """Placing a disc on `square` flips all `captured` discs"""

    square: Square
    captured: list[Square] = field(default_factory=list)

    def to_algebraic(self) -> str:
        return self.square.to_algebraic()


# --- CAPTURING RULES ---
def capture_run(square: Square, direction: Vector, disc: Disc, board: Board) -> list[Square]:
    """
    Raycasting algorithm for captures.
    ---

    ---
    Walk along the direction while we keep finding the opponent's discs.
    The walk ends on the edge of the board, an empty square, or one of your own discs.

    Only the last case captures anything: the run of opponent discs is bracketed between the new disc and your own.
    (An empty run captures nothing either: the neighbouring square must be the opponent's.)
    """
    opponent = disc.opponent()
    run: list[Square] = []
    target_square = square.shifted(direction)
    while target_square.is_within_bounds() and board.disc(target_square) == opponent:
        run.append(target_square)
        target_square = target_square.shifted(direction)

    if not target_square.is_within_bounds():
        return []
    if board.disc(target_square) != disc:
        return []
    return run


def captured_discs(square: Square, disc: Disc, board: Board) -> list[Square]:
    """Combine the confirmed runs of all 8 directions (in order of DIRECTIONS)"""
    captured: list[Square] = []
    for direction in DIRECTIONS:
        captured.extend(capture_run(square, direction, disc, board))
    return captured


def legal_moves(board: Board, disc: Disc) -> list[Move]:
    """
    List of legal moves for the player with the 'disc' color
    ----

    Scans the empty squares in row-major order. An empty square is a legal move iff it captures at least one disc.
    NOTE: The order is deterministic, so the opponent's random tie-breaks can be reproduced with a seeded RNG.
    """
    moves: list[Move] = []
    for square in all_squares():
        if board.disc(square) != Disc.EMPTY:
            continue

        captured = captured_discs(square, disc, board)
        if captured:
            moves.append(Move(square, captured))

    logger.debug("%d legal moves for %s", len(moves), disc.name.lower())
    return moves


def find_move(moves: list[Move], square: Square) -> Move | None:
    """Look up the move that places a disc on the given square (if it is one of the moves)"""
    return next((move for move in moves if move.square == square), None)
