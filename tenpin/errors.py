"""
errors.py

Errors raised while parsing and scoring roll sequences.
"""

from enum import Enum


class ErrorKind(Enum):
    SPARE_OUT_OF_PLACE = "Encountered a / in an unexpected spot"
    STRIKE_OUT_OF_PLACE = "Encountered a X in an unexpected spot"
    SCORE_TOO_LARGE = "Encountered a frame with too big of a score"


class ScoringError(ValueError):
    """Base class for invalid roll sequences.

    ``str(error)`` is always the fixed diagnostic message of the error kind,
    so callers can match on either ``kind`` or the exception class.
    """

    kind = None

    def __init__(self, position=None):
        super().__init__(self.kind.value)
        self.position = position

    def __repr__(self):
        return f"{self.__class__.__name__}(position={self.position})"


class SpareOutOfPlace(ScoringError):
    kind = ErrorKind.SPARE_OUT_OF_PLACE


class StrikeOutOfPlace(ScoringError):
    kind = ErrorKind.STRIKE_OUT_OF_PLACE


class ScoreTooLarge(ScoringError):
    kind = ErrorKind.SCORE_TOO_LARGE


class MalformedRollError(ValueError):
    """Raised for tokens that are not a single pin count, ``/`` or ``X``."""

    def __init__(self, token):
        super().__init__(f"Malformed roll: {token!r}")
        self.token = token
