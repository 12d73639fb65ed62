"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    GAME_OVER = "game over"


# --- NOTE The domain layer uses its own Disc enum (which also has an EMPTY option, see src/reversi/disc.py).
# --- Color only names the two sides, so it is what crosses the boundary. Convert between them by name.


class Color(StrEnum):
    BLACK = "black"
    WHITE = "white"


class Difficulty(StrEnum):
    BASIC = "basic"
    ADVANCED = "advanced"


class EventKind(StrEnum):
    DISC_PLACED = "disc_placed"
    DISC_FLIPPED = "disc_flipped"
    TURN_READY = "turn_ready"
    TURN_PASSED = "turn_passed"
    GAME_OVER = "game_over"
