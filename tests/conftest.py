"""
Pytest configuration and shared fixtures.
"""

import pytest
import json
import logging
import random
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Dict, List

from scoreboard.factory import MatchFactory
from scoreboard.logger import StructuredLogger, reset_logger
from scoreboard.scoreboard import Scoreboard


class StepClock:
    """Clock that moves forward by a fixed step on every call."""

    def __init__(self, start: datetime = datetime(2026, 6, 11, 18, 0, 0), step: timedelta = timedelta(seconds=1)):
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        now = self.current
        self.current = self.current + self.step
        return now


@pytest.fixture(autouse=True)
def quiet_global_logger(monkeypatch):
    """Fresh process-wide logger per test, off the console, level restored."""
    monkeypatch.setenv("SCOREBOARD_LOG_CONSOLE", "false")
    monkeypatch.delenv("SCOREBOARD_LOG_DIR", raising=False)
    monkeypatch.delenv("SCOREBOARD_LOG_LEVEL", raising=False)
    reset_logger()
    yield
    reset_logger()
    logging.getLogger("scoreboard").setLevel(logging.NOTSET)


@pytest.fixture
def clock() -> StepClock:
    return StepClock()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def factory(clock, rng) -> MatchFactory:
    return MatchFactory(clock=clock, rng=rng)


@pytest.fixture
def logger() -> StructuredLogger:
    return StructuredLogger(name="scoreboard.test", level="DEBUG", enable_console=False)


@pytest.fixture
def board(factory, logger) -> Scoreboard:
    return Scoreboard(factory=factory, logger=logger)


@pytest.fixture
def world_cup_events() -> List[Dict[str, Any]]:
    """Start order and final scores of the World Cup example."""
    return [
        {"action": "start", "ref": "mex", "home": "Mexico", "away": "Canada"},
        {"action": "start", "ref": "esp", "home": "Spain", "away": "Brazil"},
        {"action": "start", "ref": "ger", "home": "Germany", "away": "France"},
        {"action": "start", "ref": "uru", "home": "Uruguay", "away": "Italy"},
        {"action": "start", "ref": "arg", "home": "Argentina", "away": "Australia"},
        {"action": "update", "ref": "mex", "home": 0, "away": 5},
        {"action": "update", "ref": "esp", "home": 10, "away": 2},
        {"action": "update", "ref": "ger", "home": 2, "away": 2},
        {"action": "update", "ref": "uru", "home": 6, "away": 6},
        {"action": "update", "ref": "arg", "home": 3, "away": 1},
    ]


@pytest.fixture
def events_file(tmp_path, world_cup_events) -> Path:
    """World Cup events written to a temporary JSON file."""
    path = tmp_path / "events.json"
    path.write_text(json.dumps(world_cup_events, indent=2))
    return path
