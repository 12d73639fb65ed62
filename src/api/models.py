"""Requests and Response models"""

from typing import Optional, Self
from uuid import UUID

from pydantic import BaseModel, field_validator, model_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, Difficulty, EventKind, Status

BOARD_SIZE = 8
BOARD_ROW_SEPARATOR = "/"
BOARD_CHARACTERS = "BW."

SquareName = str


# --- REQUEST MODELS ---
class NewGameRequest(BaseModel):
    difficulty: Optional[Difficulty] = None
    starting_board: Optional[str] = None
    color_to_move: Color = Color.BLACK

    @field_validator("starting_board")
    @classmethod
    def validate_starting_board(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value

        rows = value.strip().split(BOARD_ROW_SEPARATOR)
        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise InvalidRequestError(
                f"Board must contain {BOARD_SIZE} rows of {BOARD_SIZE} squares separated by {BOARD_ROW_SEPARATOR!r}."
            )
        if any(character.upper() not in BOARD_CHARACTERS for row in rows for character in row):
            raise InvalidRequestError(
                f"Board squares must be one of {BOARD_CHARACTERS!r}."
            )
        return value.strip()


class AttemptMoveRequest(BaseModel):
    """Either give the square in algebraic notation ('d3'), or its row and column (zero-based)"""

    game_id: UUID
    row: Optional[int] = None
    col: Optional[int] = None
    square: Optional[SquareName] = None

    @field_validator(*["row", "col"])
    @classmethod
    def validate_index(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and not (0 <= value < BOARD_SIZE):
            raise InvalidRequestError(
                f"Row and column must lie in [0, {BOARD_SIZE}). Got {value}."
            )
        return value

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: Optional[str]) -> Optional[str]:
        def _is_algebraic_notation(value: str) -> bool:
            if len(value) != 2:
                return False

            first_character = value[0].lower()
            second_character = value[1]
            if not ("a" <= first_character <= "h" and second_character in "12345678"):
                return False
            return True

        if value is not None and not _is_algebraic_notation(value):
            raise InvalidRequestError(
                f"Cannot interpret square: {value!r} as a valid square name."
            )
        return value

    @model_validator(mode="after")
    def validate_target(self) -> Self:
        has_coordinates = self.row is not None and self.col is not None
        if has_coordinates == (self.square is not None):
            raise InvalidRequestError(
                "Give either both row and col, or a square name (not both)."
            )
        return self


class OpponentMoveRequest(BaseModel):
    game_id: UUID
    difficulty: Optional[Difficulty] = None


class GetGameRequest(BaseModel):
    game_id: UUID


class LegalMovesRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class SquareResponse(BaseModel):
    row: int
    col: int
    name: SquareName


class MoveResponse(BaseModel):
    square: SquareResponse
    captured: list[SquareResponse]


class EventResponse(BaseModel):
    """Only the fields relevant to the kind of event are filled in"""

    kind: EventKind
    color: Optional[Color] = None
    square: Optional[SquareResponse] = None
    legal_moves: list[MoveResponse] = []
    next_to_move: Optional[Color] = None
    score: dict[Color, int] = {}
    winner: Optional[Color] = None


class GameResponse(BaseModel):
    game_id: UUID
    board: list[str]
    color_to_move: Color
    status: Status
    difficulty: Difficulty
    legal_moves: list[MoveResponse]
    score: dict[Color, int]
    winner: Optional[Color]
    is_draw: bool
    move_history: list[str]
    accepted: bool
    events: list[EventResponse]
    status_message: str


class LegalMovesResponse(BaseModel):
    game_id: UUID
    color: Color
    legal_moves: list[MoveResponse]
