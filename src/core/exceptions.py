"""Custom exceptions. Every layer raises (a subclass of) GameError so callers can catch one top-level type."""


class GameError(Exception):
    """Base class of all errors raised by this project."""


class GameStateError(GameError):
    """A game record cannot be interpreted (unknown status, malformed board text, ...)."""


class IllegalActionError(GameError):
    """
    The requested action is not allowed in the current state of the game.

    NOTE: never fatal. The service swallows these and reports the unchanged state.
    """


class NotYourTurnError(IllegalActionError):
    """Acting with the color that is not to move."""


class IllegalMoveError(IllegalActionError):
    """The square is not in the current set of legal moves."""


class GameOverError(IllegalActionError):
    """Acting after the game has ended."""


class InvalidRequestError(GameError):
    """Raised by the request validators at the boundary."""


class RepositoryError(GameError):
    """Game record could not be found."""
