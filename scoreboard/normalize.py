def normalize_team_name(name: str) -> str:
    return name.strip()


def team_key(name: str) -> str:
    """Comparison key for deciding whether two team names are the same team."""
    return normalize_team_name(name).lower()


def same_team(home_team: str, away_team: str) -> bool:
    return team_key(home_team) == team_key(away_team)
