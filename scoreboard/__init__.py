"""
Live scoreboard: an in-memory registry of ongoing matches ranked by total score.

Example:
    board = Scoreboard()
    match_id = board.start_match("Mexico", "Canada")
    board.update_score(match_id, 0, 5)
    summary = board.get_summary()
    board.finish_match(match_id)
"""

__version__ = "1.0.0"

from .errors import (
    InvalidScoreError,
    MatchNotFoundError,
    MatchValidationError,
    NotFoundError,
    ScoreboardError,
    ValidationError,
)
from .factory import MatchFactory
from .models import Match, MatchSnapshot, Score
from .schema import total_score, validate_score
from .scoreboard import Scoreboard

__all__ = [
    "__version__",
    "Scoreboard",
    "Match",
    "MatchSnapshot",
    "Score",
    "MatchFactory",
    "ScoreboardError",
    "MatchValidationError",
    "MatchNotFoundError",
    "InvalidScoreError",
    "ValidationError",
    "NotFoundError",
    "validate_score",
    "total_score",
]
