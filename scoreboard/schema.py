import math
from typing import Any, List

from .errors import InvalidScoreError, MatchValidationError
from .normalize import same_team

ACTIONS = ("finish", "start", "update")
REF_REQUIRED_ACTIONS = {"update", "finish"}
TEAM_FIELDS = ["home", "away"]


def _is_non_empty_str(v: Any) -> bool:
    return isinstance(v, str) and v.strip() != ""


def _is_integer(v: Any) -> bool:
    # bool is an int subclass but never a score
    if isinstance(v, bool):
        return False
    if isinstance(v, int):
        return True
    if isinstance(v, float):
        return math.isfinite(v) and v.is_integer()
    return False


def validate_team_names(home_team: Any, away_team: Any) -> None:
    """
    Check a home/away pair before a match is created.

    Raises:
        MatchValidationError: if a name is empty after trimming, or both names
            refer to the same team (case-insensitive)
    """
    if not _is_non_empty_str(home_team):
        raise MatchValidationError("Home team name cannot be empty")
    if not _is_non_empty_str(away_team):
        raise MatchValidationError("Away team name cannot be empty")
    if same_team(home_team, away_team):
        raise MatchValidationError("Home team and away team must be different")


def score_errors(home_score: Any, away_score: Any) -> List[str]:
    """
    Returns a list of score validation messages. Empty list means valid.
    Messages follow rule order: integer checks first, then sign checks.
    """
    errors: List[str] = []
    home_ok = _is_integer(home_score)
    away_ok = _is_integer(away_score)

    if not home_ok:
        errors.append("Home score must be an integer")
    if not away_ok:
        errors.append("Away score must be an integer")
    if home_ok and home_score < 0:
        errors.append("Home score cannot be negative")
    if away_ok and away_score < 0:
        errors.append("Away score cannot be negative")

    return errors


def validate_score(home_score: Any, away_score: Any) -> None:
    """
    Validate a pair of scores.

    Only the first failing rule is reported.

    Raises:
        InvalidScoreError: if either score is not a non-negative integer
    """
    errors = score_errors(home_score, away_score)
    if errors:
        raise InvalidScoreError(errors[0])


def total_score(home_score: int, away_score: int) -> int:
    """Sum of both sides. Callers validate first."""
    return home_score + away_score


def validate_event(data: Any) -> List[str]:
    """
    Returns a list of validation messages for one replay event.
    Empty list means the event is well-formed. Team name and score values
    are only shape-checked here; the scoreboard applies its own rules.
    """
    if not isinstance(data, dict):
        return ["Event must be a JSON object"]

    errors: List[str] = []
    action = data.get("action")
    if action not in ACTIONS:
        errors.append(f"Field 'action' must be one of: {', '.join(ACTIONS)}")
        return errors

    ref = data.get("ref")
    if action in REF_REQUIRED_ACTIONS:
        if "ref" not in data:
            errors.append("Missing required field: ref")
        elif not _is_non_empty_str(ref):
            errors.append("Field 'ref' must be a non-empty string")
    elif ref is not None and not _is_non_empty_str(ref):
        errors.append("Field 'ref' must be a non-empty string if provided")

    if action == "start":
        for f in TEAM_FIELDS:
            if f not in data:
                errors.append(f"Missing required field: {f}")
            elif not isinstance(data[f], str):
                errors.append(f"Field '{f}' must be a string")
    elif action == "update":
        for f in TEAM_FIELDS:
            if f not in data:
                errors.append(f"Missing required field: {f}")

    return errors
