"""
The computer opponent: pick one of the legal moves.

Key idea: use strategy pattern to define a move selection policy for each difficulty.
A stronger policy can be registered without touching the rest of the game.
"""

import random
from typing import Callable

from src.core.shared_types import Difficulty
from src.reversi.moves import Move
from src.reversi.square import Square

# Corners are worth the most, the squares diagonally next to a corner the least.
POSITION_WEIGHTS: tuple[tuple[int, ...], ...] = (
    (100, -20, 10, 5, 5, 10, -20, 100),
    (-20, -50, -2, -2, -2, -2, -50, -20),
    (10, -2, -1, -1, -1, -1, -2, 10),
    (5, -2, -1, -1, -1, -1, -2, 5),
    (5, -2, -1, -1, -1, -1, -2, 5),
    (10, -2, -1, -1, -1, -1, -2, 10),
    (-20, -50, -2, -2, -2, -2, -50, -20),
    (100, -20, 10, 5, 5, 10, -20, 100),
)


def position_weight(square: Square) -> int:
    return POSITION_WEIGHTS[square.row][square.col]


def choose_random_move(moves: list[Move], rng: random.Random) -> Move:
    """Basic: every legal move is equally likely"""
    return rng.choice(moves)


def choose_weighted_move(moves: list[Move], rng: random.Random) -> Move:
    """
    Advanced: only look at where the disc lands
    ---

    Keep the moves whose square has the highest weight and pick one of those at random.
    No lookahead, and the number of captured discs does not matter.
    """
    best_weight = max(position_weight(move.square) for move in moves)
    best_moves = [move for move in moves if position_weight(move.square) == best_weight]
    return rng.choice(best_moves)


# -- STRATEGY PATTERN: OPPONENT POLICIES ---
ChooseMoveFn = Callable[[list[Move], random.Random], Move]
OPPONENT_POLICIES: dict[Difficulty, ChooseMoveFn] = {
    Difficulty.BASIC: choose_random_move,
    Difficulty.ADVANCED: choose_weighted_move,
}


def choose_move(
    moves: list[Move], difficulty: Difficulty, rng: random.Random | None = None
) -> Move:
    """Pick a move from a non-empty list of legal moves."""
    if not moves:
        # Programming error: the game never asks the opponent to move without legal moves
        raise ValueError("Cannot choose a move from an empty set of legal moves.")
    policy = OPPONENT_POLICIES[Difficulty(difficulty)]
    return policy(moves, rng or random.Random())
