"""Orchestration of communication from the presentation layer to the game logic and session storage (and the reverse direction)."""

import logging
import random
from typing import Callable, Optional
from uuid import UUID

from src.api.models import (
    AttemptMoveRequest,
    DeleteGameRequest,
    EventResponse,
    GameResponse,
    GetGameRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveResponse,
    NewGameRequest,
    OpponentMoveRequest,
    SquareResponse,
)
from src.core.config import ReversiConfig, get_config
from src.core.exceptions import IllegalActionError, RepositoryError
from src.core.models import GameModel
from src.core.shared_types import Color, Difficulty, EventKind, Status
from src.db.repository import GameRepository
from src.reversi.disc import Disc
from src.reversi.events import (
    DiscFlipped,
    DiscPlaced,
    GameEvent,
    TurnPassed,
    TurnReady,
)
from src.reversi.game import COMPUTER, HUMAN, Game
from src.reversi.moves import Move
from src.reversi.square import Square

logger = logging.getLogger(__name__)

SIDE_NAMES: dict[Disc, str] = {HUMAN: "Player", COMPUTER: "Computer"}

GameAction = Callable[[Game], None]


class ReversiService:
    """Orchestration of layers for a Reversi game against the computer."""

    def __init__(
        self,
        repository: GameRepository,
        config: Optional[ReversiConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.repo = repository
        self.config = config or get_config()
        self.rng = rng or random.Random(self.config.engine.seed)

    # -- Presentation layer calls ---
    def new_game(self, request: NewGameRequest) -> GameResponse:
        """Start a fresh game. The previous one (if any) is simply not referenced anymore."""

        difficulty = request.difficulty or self.config.engine.default_difficulty
        game = Game.new_game(
            difficulty=difficulty,
            starting_board=request.starting_board,
            color_to_move=Disc[request.color_to_move.name],
        )
        events = game.drain_events()

        _, game_id = self.repo.create_game(game.to_model())
        return self._create_game_response(game_id, game, events, accepted=True)

    def attempt_move(self, request: AttemptMoveRequest) -> GameResponse:
        """
        The player clicked a square.
        ----
        Only honoured when it is the player's turn and the square is a legal move. Anything else is ignored (nothing changes).
        """
        if request.square is not None:
            square = Square.from_algebraic(request.square)
        else:
            # for the type checker: the request validates that both are given when there is no square name
            assert request.row is not None and request.col is not None
            square = Square(request.row, request.col)

        return self._play(request.game_id, lambda game: game.make_move(square, HUMAN))

    def choose_opponent_move(self, request: OpponentMoveRequest) -> GameResponse:
        """
        The computer's turn.
        ----
        The presentation layer decides when to call this (ex. after a short delay, so the player can follow the game).
        Ignored when it is not the computer's turn.
        """

        def _opponent_turn(game: Game) -> None:
            if request.difficulty is not None:
                game.difficulty = Difficulty(request.difficulty)
            move = game.opponent_move(self.rng)
            game.make_move(move.square, COMPUTER)

        return self._play(request.game_id, _opponent_turn)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """Retrieve current game state."""
        game = Game.from_model(self._fetch_game(request.game_id))
        return self._create_game_response(request.game_id, game, [], accepted=True)

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """The player's legal moves (to highlight them). Empty while it is not the player's turn."""
        game = Game.from_model(self._fetch_game(request.game_id))
        try:
            moves = game.legal_moves(HUMAN)
        except IllegalActionError as error:
            logger.debug("No legal moves to show: %s", error)
            moves = []
        return LegalMovesResponse(
            game_id=request.game_id,
            color=Color[HUMAN.name],
            legal_moves=[_move_response(move) for move in moves],
        )

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to forget a game."""
        self.repo.delete_game(request.game_id)

    # -- Internal helpers --
    def _play(self, game_id: UUID, action: GameAction) -> GameResponse:
        """
        Load the game, perform the action, store the result.
        ---

        An illegal action (not your turn, not a legal square, game already over) is never fatal:
        it is logged and the unchanged game is reported back with accepted=False.
        """
        game = Game.from_model(self._fetch_game(game_id))
        try:
            action(game)
        except IllegalActionError as error:
            logger.warning("Ignored illegal action in game %s: %s", game_id, error)
            unchanged = Game.from_model(self._fetch_game(game_id))
            return self._create_game_response(game_id, unchanged, [], accepted=False)

        events = game.drain_events()
        self.repo.update_game(game_id, game.to_model())
        return self._create_game_response(game_id, game, events, accepted=True)

    def _create_game_response(
        self, game_id: UUID, game: Game, events: list[GameEvent], accepted: bool
    ) -> GameResponse:
        """Convert the Game (+ the events of this call) into a GameResponse"""
        score = game.score
        winner = game.winner
        return GameResponse(
            game_id=game_id,
            board=game.board.rows(),
            color_to_move=Color[game.color_to_move.name],
            status=Status[game.status.name],
            difficulty=game.difficulty,
            legal_moves=[_move_response(move) for move in game.legal],
            score={Color[disc.name]: count for disc, count in score.items()},
            winner=Color[winner.name] if winner else None,
            is_draw=game.is_draw,
            move_history=list(game.history),
            accepted=accepted,
            events=[_event_response(event) for event in events],
            status_message=_status_message(game, events),
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model


# -- Conversion of domain objects into response models --
def _square_response(square: Square) -> SquareResponse:
    return SquareResponse(row=square.row, col=square.col, name=square.to_algebraic())


def _move_response(move: Move) -> MoveResponse:
    return MoveResponse(
        square=_square_response(move.square),
        captured=[_square_response(square) for square in move.captured],
    )


def _event_response(event: GameEvent) -> EventResponse:
    if isinstance(event, DiscPlaced):
        return EventResponse(
            kind=EventKind.DISC_PLACED,
            color=Color[event.disc.name],
            square=_square_response(event.square),
        )
    if isinstance(event, DiscFlipped):
        return EventResponse(
            kind=EventKind.DISC_FLIPPED,
            color=Color[event.disc.name],
            square=_square_response(event.square),
        )
    if isinstance(event, TurnReady):
        return EventResponse(
            kind=EventKind.TURN_READY,
            color=Color[event.disc.name],
            legal_moves=[_move_response(move) for move in event.legal_moves],
        )
    if isinstance(event, TurnPassed):
        return EventResponse(
            kind=EventKind.TURN_PASSED,
            color=Color[event.skipped.name],
            next_to_move=Color[event.next_to_move.name],
        )
    return EventResponse(
        kind=EventKind.GAME_OVER,
        score={Color[disc.name]: count for disc, count in event.score.items()},
        winner=Color[event.winner.name] if event.winner else None,
    )


def _status_message(game: Game, events: list[GameEvent]) -> str:
    """One line of text describing what happens next"""
    if game.winner or game.is_draw:
        if game.is_draw:
            return "Game over! Draw!"
        return "Game over! You win!" if game.winner == HUMAN else "Game over! Computer wins!"

    passed = next((event for event in events if isinstance(event, TurnPassed)), None)
    if passed:
        return f"{SIDE_NAMES[passed.skipped]} has no legal move. Pass! {SIDE_NAMES[passed.next_to_move]} to move."

    if game.color_to_move == HUMAN:
        return "Your turn (black)"
    return "Computer's turn (white)"
