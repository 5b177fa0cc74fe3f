"""
Construction of new Match records.

The factory validates team names, assigns an identifier and a start time, and
numbers each match it creates. It never touches a scoreboard's collection.
"""

import itertools
import random
import string
from datetime import datetime
from typing import Callable, Optional

from .models import Match
from .normalize import normalize_team_name
from .schema import validate_team_names

ID_ALPHABET = string.digits + string.ascii_lowercase
ID_SUFFIX_LENGTH = 7


def generate_match_id(started_at: datetime, rng: random.Random) -> str:
    """
    Build an id of the form ``<epoch milliseconds>-<base36 suffix>``.

    Args:
        started_at: Timestamp the prefix is derived from
        rng: Randomness source for the suffix

    Returns:
        Match identifier string
    """
    millis = int(started_at.timestamp() * 1000)
    suffix = "".join(rng.choice(ID_ALPHABET) for _ in range(ID_SUFFIX_LENGTH))
    return f"{millis}-{suffix}"


class MatchFactory:
    """
    Creates matches with 0-0 scores.

    Start times never go backwards between two matches from the same
    factory, and every match gets a sequence number one higher than the last.
    """

    def __init__(
        self,
        clock: Optional[Callable[[], datetime]] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Args:
            clock: Returns the current time (default: datetime.now)
            rng: Source for id suffixes (default: random.SystemRandom)
        """
        self.clock = clock or datetime.now
        self.rng = rng or random.SystemRandom()
        self._sequence = itertools.count(1)
        self._last_started_at: Optional[datetime] = None

    def create_match(self, home_team: str, away_team: str) -> Match:
        """
        Create a new match between two teams.

        Raises:
            MatchValidationError: if a name is empty or both name the same team
        """
        validate_team_names(home_team, away_team)

        started_at = self._now()
        return Match(
            id=generate_match_id(started_at, self.rng),
            home_team=normalize_team_name(home_team),
            away_team=normalize_team_name(away_team),
            started_at=started_at,
            sequence=next(self._sequence),
        )

    def _now(self) -> datetime:
        now = self.clock()
        if self._last_started_at is not None and now < self._last_started_at:
            now = self._last_started_at
        self._last_started_at = now
        return now
