"""
Match records held by the scoreboard and the read-only snapshots handed to callers.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict

from .schema import total_score


@dataclass(frozen=True)
class Score:
    """Home and away goals as a pair."""

    home: int
    away: int


@dataclass
class Match:
    """Live match record. Only the owning Scoreboard mutates it."""

    id: str
    home_team: str
    away_team: str
    started_at: datetime
    sequence: int
    home_score: int = 0
    away_score: int = 0

    @property
    def total(self) -> int:
        return total_score(self.home_score, self.away_score)

    def snapshot(self) -> "MatchSnapshot":
        return MatchSnapshot(
            id=self.id,
            home_team=self.home_team,
            away_team=self.away_team,
            home_score=self.home_score,
            away_score=self.away_score,
            started_at=self.started_at,
            sequence=self.sequence,
        )


@dataclass(frozen=True)
class MatchSnapshot:
    """Immutable copy of a match's state at the time of a summary."""

    id: str
    home_team: str
    away_team: str
    home_score: int
    away_score: int
    started_at: datetime
    sequence: int

    @property
    def total(self) -> int:
        return total_score(self.home_score, self.away_score)

    @property
    def score(self) -> Score:
        return Score(home=self.home_score, away=self.away_score)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "home_team": self.home_team,
            "away_team": self.away_team,
            "home_score": self.home_score,
            "away_score": self.away_score,
            "total": self.total,
            "started_at": self.started_at.isoformat(),
        }

    def __str__(self) -> str:
        return f"{self.home_team} {self.home_score} - {self.away_team} {self.away_score}"
