"""
In-memory registry of live matches.

A Scoreboard owns every match it starts. Callers address matches by the id
returned from start_match and read state back through get_summary, which
returns independent snapshots ranked by total score.
"""

import threading
from typing import Dict, List, Optional

from .errors import MatchNotFoundError, ScoreboardError
from .factory import MatchFactory
from .logger import OperationCounters, StructuredLogger, get_logger
from .models import Match, MatchSnapshot
from .schema import validate_score


def summary_sort_key(match: Match):
    return (match.total, match.started_at, match.sequence)


class Scoreboard:
    """
    Live scoreboard for ongoing matches.

    Each instance is fully independent. A single lock is held for the whole
    of every public operation, so readers never see a half-applied update.
    Operation counters are kept per instance as well.
    """

    def __init__(
        self,
        factory: Optional[MatchFactory] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        self._factory = factory or MatchFactory()
        self._logger = logger or get_logger()
        self._matches: Dict[str, Match] = {}
        self._lock = threading.Lock()
        self.counters = OperationCounters()

    def start_match(self, home_team: str, away_team: str) -> str:
        """
        Start a new match with a 0-0 score.

        Args:
            home_team: Home team name
            away_team: Away team name

        Returns:
            Match ID for later updates

        Raises:
            MatchValidationError: if team names are invalid
        """
        with self._lock:
            match = self._guard(self._factory.create_match, home_team, away_team)
            self._matches[match.id] = match
            self.counters.record_match_started()

        self._logger.debug(
            "Match started",
            match_id=match.id,
            home_team=match.home_team,
            away_team=match.away_team,
        )
        return match.id

    def update_score(self, match_id: str, home_score: int, away_score: int) -> None:
        """
        Replace both scores of an active match.

        Scores may go down as well as up so mistakes can be corrected.

        Raises:
            MatchNotFoundError: if no active match has this id
            InvalidScoreError: if either score is not a non-negative integer
        """
        with self._lock:
            match = self._guard(self._get, match_id)
            self._guard(validate_score, home_score, away_score)
            match.home_score = int(home_score)
            match.away_score = int(away_score)
            self.counters.record_score_update()

        self._logger.debug(
            "Score updated",
            match_id=match_id,
            home_score=int(home_score),
            away_score=int(away_score),
        )

    def finish_match(self, match_id: str) -> None:
        """
        Remove a match from the scoreboard for good.

        Raises:
            MatchNotFoundError: if no active match has this id
        """
        with self._lock:
            self._guard(self._get, match_id)
            del self._matches[match_id]
            self.counters.record_match_finished()

        self._logger.debug("Match finished", match_id=match_id)

    def get_summary(self) -> List[MatchSnapshot]:
        """
        Snapshot of all active matches.

        Ordered by total score, highest first. Matches with the same total
        are ordered by most recently started first.

        Returns:
            New list of snapshots (empty if no matches are active)
        """
        with self._lock:
            ranked = sorted(self._matches.values(), key=summary_sort_key, reverse=True)
            summary = [match.snapshot() for match in ranked]
            self.counters.record_summary()

        return summary

    def get_metrics(self) -> dict:
        """Counters for this scoreboard only."""
        return self.counters.get_metrics()

    def log_metrics_summary(self) -> None:
        self._logger.log_metrics_summary(self.get_metrics())

    def __len__(self) -> int:
        with self._lock:
            return len(self._matches)

    def __contains__(self, match_id: object) -> bool:
        with self._lock:
            return match_id in self._matches

    def _get(self, match_id: str) -> Match:
        match = self._matches.get(match_id)
        if match is None:
            raise MatchNotFoundError(f"Match with ID '{match_id}' not found", match_id=match_id)
        return match

    def _guard(self, func, *args):
        """Call func, counting any ScoreboardError before re-raising it."""
        try:
            return func(*args)
        except ScoreboardError as e:
            self.counters.record_rejection(type(e).__name__)
            raise
