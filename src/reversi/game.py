"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating all the business logic required to play a turn of Reversi -->
derive the legal moves, place a disc and flip the captured ones, pass when a player cannot move, and detect the end of the game.
Every change is recorded as an event, which the service layer passes onwards to the API layer.
"""

import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Self

from src.core.exceptions import (
    GameOverError,
    GameStateError,
    IllegalMoveError,
    NotYourTurnError,
)
from src.core.models import GameModel
from src.core.shared_types import Difficulty
from src.reversi.board import Board
from src.reversi.disc import AVAILABLE_COLOR_NAMES, FIRST_TO_MOVE, Disc
from src.reversi.events import (
    DiscFlipped,
    DiscPlaced,
    GameEvent,
    GameOver,
    TurnPassed,
    TurnReady,
)
from src.reversi.moves import Move, find_move
from src.reversi.policy import choose_move
from src.reversi.square import Square

logger = logging.getLogger(__name__)

# The human plays black (and therefore moves first), the computer plays white.
HUMAN = Disc.BLACK
COMPUTER = Disc.WHITE

PASS = "pass"


class Status(Enum):
    IN_PROGRESS = auto()
    GAME_OVER = auto()


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    color_to_move: Disc
    status: Status
    difficulty: Difficulty
    history: list[str]  # squares in algebraic notation, or "pass"
    legal: list[Move] = field(default_factory=list)
    events: list[GameEvent] = field(default_factory=list)

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        status_name = model.status.replace(" ", "_").upper()
        if status_name not in Status.__members__:
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join([status.name.lower() for status in Status])}"
            )
        color_name = model.color_to_move.upper()
        if color_name not in AVAILABLE_COLOR_NAMES:
            raise GameStateError(
                f"Invalid color to move: {model.color_to_move!r}. \nPick one from {','.join([c.lower() for c in AVAILABLE_COLOR_NAMES])}"
            )
        if model.difficulty not in [difficulty.value for difficulty in Difficulty]:
            raise GameStateError(f"Invalid difficulty: {model.difficulty!r}")

        # create the Game
        game = cls(
            board=Board.from_text(model.board),
            color_to_move=Disc[color_name],
            status=Status[status_name],
            difficulty=Difficulty(model.difficulty),
            history=list(model.move_history),
        )

        # legal moves are never stored: recompute them for the player to move
        if game.status == Status.IN_PROGRESS:
            game.legal = game.board.generate_legal_moves(game.color_to_move)
        return game

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""

        return GameModel(
            board=self.board.to_text(),
            color_to_move=self.color_to_move.name.lower(),
            status=self.status.name.lower(),
            difficulty=str(self.difficulty),
            move_history=list(self.history),
        )

    @classmethod
    def new_game(
        cls,
        difficulty: Difficulty = Difficulty.ADVANCED,
        starting_board: Optional[str] = None,
        color_to_move: Disc = FIRST_TO_MOVE,
    ) -> Self:
        """
        Start a new game. Black moves first from the canonical starting position, unless told otherwise.

        NOTE: The legal moves of the first player are computed straight away (this may already be a pass on a custom board).
        """
        if color_to_move == Disc.EMPTY:
            raise GameStateError("An empty square cannot move first.")

        board = (
            Board.from_text(starting_board)
            if starting_board
            else Board.starting_position()
        )
        game = cls(
            board=board,
            color_to_move=color_to_move,
            status=Status.IN_PROGRESS,
            difficulty=Difficulty(difficulty),
            history=[],
        )
        logger.info("New game (difficulty: %s)", game.difficulty)
        game._start_turn(color_to_move)
        return game

    @property
    def score(self) -> dict[Disc, int]:
        return self.board.count_discs()

    @property
    def winner(self) -> Optional[Disc]:
        """Only known when the game is over. The player with more discs wins (None for a draw)."""
        if self.status != Status.GAME_OVER:
            return None
        return self._leading_player()

    @property
    def is_draw(self) -> bool:
        return self.status == Status.GAME_OVER and self._leading_player() is None

    def legal_moves(self, color: Disc) -> list[Move]:
        """
        Service will request the set of legal moves (to highlight them to the user).
        ----

        1. Check the game did not end yet
        2. Check if it is your turn
        3. Yes? Return the legal moves computed at the start of this turn.
        """
        self._assert_in_progress()
        self._assert_your_turn(color)
        return list(self.legal)

    def make_move(self, square: Square, color: Disc) -> None:
        """
        Attempt to place a disc
        -----

        1. make sure the game is in progress and it is your turn
        2. make sure the square is one of the legal moves
        3. update the board (place + flip), recording an event for each changed square
        4. update the move history
        5. hand the turn to the next player (pass / end the game if needed)
        """
        self._assert_in_progress()
        self._assert_your_turn(color)

        move = find_move(self.legal, square)
        if move is None:
            raise IllegalMoveError(f"Move not allowed: {square.to_algebraic()}")

        self._update_board(move, color)
        self._update_history(move.to_algebraic())
        logger.info(
            "%s played %s, captured %d",
            color.name.lower(),
            move.to_algebraic(),
            len(move.captured),
        )

        self._start_turn(color.opponent())

    def opponent_move(self, rng: Optional[random.Random] = None) -> Move:
        """
        Let the computer pick its move (using the difficulty of this game).
        NOTE: Does not make the move, the Service passes the choice back into make_move()
        """
        self._assert_in_progress()
        self._assert_your_turn(COMPUTER)
        return choose_move(self.legal, self.difficulty, rng)

    def drain_events(self) -> list[GameEvent]:
        """Hand over the events recorded so far (and forget them)"""
        events, self.events = self.events, []
        return events

    # -- PRIVATE HELPERS ---
    def _assert_in_progress(self) -> None:
        if self.status != Status.IN_PROGRESS:
            raise GameOverError(f"Game is not in progress. status: {self.status}")

    def _assert_your_turn(self, color: Disc) -> None:
        """You must wait for your turn before asking for legal moves / making a move."""
        if color != self.color_to_move:
            raise NotYourTurnError(
                f"It is not your turn. Waiting for {self.color_to_move.name.lower()} to make a move first."
            )

    def _update_board(self, move: Move, color: Disc) -> None:
        """Place the disc and flip the captured discs. First changed square is the placement."""
        placed, *flipped = self.board.apply_move(move, color)
        self._emit(DiscPlaced(placed, color))
        for square in flipped:
            self._emit(DiscFlipped(square, color))

    def _update_history(self, entry: str) -> None:
        self.history.append(entry)

    def _start_turn(self, color: Disc) -> None:
        """
        Hand the turn to `color`
        ----

        1. compute its legal moves. Any? --> its turn.
        2. None? --> it has to pass. Compute the legal moves of its opponent.
        3. None either? --> both players are stuck, the game is over.
        """
        self.color_to_move = color
        self.legal = self.board.generate_legal_moves(color)
        if self.legal:
            self._emit(TurnReady(color, list(self.legal)))
            return

        opponent = color.opponent()
        self.color_to_move = opponent
        self.legal = self.board.generate_legal_moves(opponent)
        if not self.legal:
            self._end_game()
            return

        logger.info("%s cannot move and passes", color.name.lower())
        self._update_history(PASS)
        self._emit(TurnPassed(skipped=color, next_to_move=opponent))
        self._emit(TurnReady(opponent, list(self.legal)))

    def _end_game(self) -> None:
        self._change_status(Status.GAME_OVER)
        score = self.score
        winner = self._leading_player()
        logger.info(
            "Game over. black: %d, white: %d, winner: %s",
            score[Disc.BLACK],
            score[Disc.WHITE],
            winner.name.lower() if winner else "draw",
        )
        self._emit(GameOver(score=score, winner=winner))

    def _leading_player(self) -> Optional[Disc]:
        score = self.score
        if score[Disc.BLACK] == score[Disc.WHITE]:
            return None
        return Disc.BLACK if score[Disc.BLACK] > score[Disc.WHITE] else Disc.WHITE

    def _change_status(self, new_status: Status) -> None:
        self.status = new_status

    def _emit(self, event: GameEvent) -> None:
        self.events.append(event)
