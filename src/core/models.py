"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/repository layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the storage, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass

# Type aliases to make GameModel easier to read
BoardText = str
ColorName = str


@dataclass
class GameModel:
    """Transport-safe representation of a Reversi game used between API, Service, repository, and Game layers."""

    board: BoardText
    color_to_move: ColorName
    status: str
    difficulty: str
    move_history: list[str]
