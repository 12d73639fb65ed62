"""
Notifications emitted by the Game after every (synchronous) change.

The consumer decides how and when to show them (animate the flips one by one, delay the computer's turn, ...).
"""

from dataclasses import dataclass, field
from typing import Optional

from src.reversi.disc import Disc
from src.reversi.moves import Move
from src.reversi.square import Square


@dataclass(frozen=True)
class DiscPlaced:
    square: Square
    disc: Disc


@dataclass(frozen=True)
class DiscFlipped:
    square: Square
    disc: Disc


@dataclass(frozen=True)
class TurnReady:
    """`disc` is to move and can choose from `legal_moves`"""

    disc: Disc
    legal_moves: list[Move] = field(default_factory=list)


@dataclass(frozen=True)
class TurnPassed:
    """`skipped` had no legal move, so `next_to_move` moves again"""

    skipped: Disc
    next_to_move: Disc


@dataclass(frozen=True)
class GameOver:
    """Neither player can move. No winner means a draw."""

    score: dict[Disc, int]
    winner: Optional[Disc]


GameEvent = DiscPlaced | DiscFlipped | TurnReady | TurnPassed | GameOver
