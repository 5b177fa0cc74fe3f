"""
Error taxonomy for scoreboard operations.

Every failure raised by the library derives from ScoreboardError, so callers
can catch broadly or narrowly. Each class also carries a ``kind`` tag for
callers that prefer to branch on a value instead of a type.
"""

from typing import Optional


class ScoreboardError(Exception):
    """Base class for all scoreboard failures."""

    kind = "scoreboard"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class MatchValidationError(ScoreboardError):
    """Raised when match creation input is malformed or conflicting."""

    kind = "validation"


class MatchNotFoundError(ScoreboardError):
    """Raised when an operation references a match that is not active."""

    kind = "not_found"

    def __init__(self, message: str, match_id: Optional[str] = None):
        super().__init__(message)
        self.match_id = match_id


class InvalidScoreError(ScoreboardError):
    """Raised when a score is non-integer, non-finite or negative."""

    kind = "invalid_score"


# Short names
ValidationError = MatchValidationError
NotFoundError = MatchNotFoundError
