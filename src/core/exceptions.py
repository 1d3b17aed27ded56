"""Custom exceptions raised by the domain, service and persistence layers.

The API layer translates these into HTTP responses. Everything derives from GameError, so callers
that do not care about the specific failure can catch that one.
"""

from src.core.shared_types import ErrorKind


class GameError(Exception):
    """Top-level exception for anything going wrong while handling a game."""

    kind: ErrorKind = ErrorKind.INVALID_INPUT


# --- not found ---
class NotFoundError(GameError):
    kind = ErrorKind.NOT_FOUND


class GameNotFoundError(NotFoundError):
    pass


class PlayerNotFoundError(NotFoundError):
    pass


# --- invalid input ---
class InvalidRequestError(GameError):
    kind = ErrorKind.INVALID_INPUT


class IllegalMoveError(GameError):
    kind = ErrorKind.INVALID_INPUT


# --- invalid state ---
class GameStateError(GameError):
    kind = ErrorKind.INVALID_STATE


class NotYourTurnError(GameStateError):
    pass


# --- persistence ---
class RepositoryError(GameError):
    kind = ErrorKind.STORAGE
