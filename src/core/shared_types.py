"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    WON = "won"
    DRAW = "draw"


class ErrorKind(StrEnum):
    """Category of a rejected request, as reported to API clients."""

    NOT_FOUND = "not found"
    INVALID_INPUT = "invalid input"
    INVALID_STATE = "invalid state"
    STORAGE = "storage"
