import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
TRUE_VALUES = {"1", "true", "yes", "on"}


def load_env() -> None:
    """Load .env from the working directory if present.
    Variables already set in the environment win.
    """
    env_path = Path.cwd() / ".env"
    if not env_path.exists():
        return
    load_dotenv(dotenv_path=env_path, override=False)


@dataclass(frozen=True)
class Settings:
    log_level: Optional[str] = None
    log_dir: Optional[Path] = None
    log_to_console: bool = False


def load_settings() -> Settings:
    """Read logging settings from SCOREBOARD_* environment variables.
    Unset or unknown level means the host application's level is kept.
    """
    level = os.getenv("SCOREBOARD_LOG_LEVEL", "").strip().upper()
    if level not in LOG_LEVELS:
        level = None

    log_dir = os.getenv("SCOREBOARD_LOG_DIR", "").strip()
    console = os.getenv("SCOREBOARD_LOG_CONSOLE", "").strip().lower()

    return Settings(
        log_level=level,
        log_dir=Path(log_dir) if log_dir else None,
        log_to_console=console in TRUE_VALUES,
    )
