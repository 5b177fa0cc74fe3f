"""
Structured logging for the scoreboard.

Provides centralized logging with console and file outputs, and counters
for monitoring how a scoreboard is being used.

The "scoreboard" logger belongs to the host application as much as to us:
only handlers installed here are ever removed, and level and propagation are
left alone unless explicitly configured.
"""

import logging
import sys
import threading
from pathlib import Path
from typing import Dict, List, Optional
from datetime import datetime
import json

from .env import load_settings

# Handlers installed by StructuredLogger, per logger name
_owned_handlers: Dict[str, List[logging.Handler]] = {}


def _release_handlers(name: str) -> None:
    """Detach and close handlers a previous StructuredLogger installed."""
    target = logging.getLogger(name)
    for handler in _owned_handlers.pop(name, []):
        target.removeHandler(handler)
        handler.close()


class StructuredLogger:
    """
    Centralized logger with support for console and file outputs.
    """

    def __init__(
        self,
        name: str = "scoreboard",
        level: Optional[str] = None,
        log_dir: Optional[Path] = None,
        enable_file: bool = False,
        enable_console: bool = False,
    ):
        """
        Initialize the structured logger.

        Args:
            name: Logger name
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL); None keeps
                whatever level the host application set
            log_dir: Directory for log files (default: logs/)
            enable_file: Write logs to file
            enable_console: Output logs to console (stderr)
        """
        self.name = name
        self.logger = logging.getLogger(name)
        if level:
            self.set_level(level)

        _release_handlers(name)
        self._handlers: List[logging.Handler] = []
        self._console_handler: Optional[logging.Handler] = None
        _owned_handlers[name] = self._handlers

        # Library default: no output unless someone asks for it
        self._attach(logging.NullHandler())

        if enable_console:
            self.add_console_handler()

        # File handler
        if enable_file:
            if log_dir is None:
                log_dir = Path("logs")
            log_dir.mkdir(parents=True, exist_ok=True)

            log_file = log_dir / f"scoreboard_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)
            file_formatter = logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            file_handler.setFormatter(file_formatter)
            self._attach(file_handler)

    def _attach(self, handler: logging.Handler):
        self._handlers.append(handler)
        self.logger.addHandler(handler)

    def add_console_handler(self):
        """Write records to stderr. Safe to call more than once."""
        if self._console_handler is not None:
            return
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG)
        console_formatter = logging.Formatter(
            fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_handler.setFormatter(console_formatter)
        self._console_handler = console_handler
        self._attach(console_handler)

    @property
    def handlers(self) -> List[logging.Handler]:
        """Handlers installed by this logger (never the host's)."""
        return list(self._handlers)

    def close(self):
        """Remove and close the handlers this logger installed."""
        if _owned_handlers.get(self.name) is self._handlers:
            _release_handlers(self.name)
        self._console_handler = None

    def set_level(self, level: str):
        self.logger.setLevel(getattr(logging, level.upper()))

    def debug(self, message: str, **kwargs):
        """Log debug message with optional context."""
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs):
        """Log info message with optional context."""
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message with optional context."""
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs):
        """Log error message with optional context."""
        self._log(logging.ERROR, message, kwargs)

    def _log(self, level: int, message: str, context: dict):
        if not self.logger.isEnabledFor(level):
            return
        if context:
            message = f"{message} | Context: {json.dumps(context, default=str)}"
        self.logger.log(level, message)

    def log_metrics_summary(self, metrics: dict):
        """Log a summary of one scoreboard's counters at INFO level."""
        self.info("=== Scoreboard Metrics ===")
        self.info(
            f"Matches: {metrics['matches_started']} started, "
            f"{metrics['matches_finished']} finished, {metrics['matches_active']} active"
        )
        self.info(f"Score updates: {metrics['score_updates']}")
        self.info(f"Summaries served: {metrics['summaries_served']}")

        if metrics["rejections_by_type"]:
            self.info("Rejections:")
            for error_type, count in metrics["rejections_by_type"].items():
                self.info(f"  {error_type}: {count}")


class OperationCounters:
    """
    Counts the operations of a single scoreboard.

    Every Scoreboard owns one, so the numbers never mix between boards.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self.metrics = {
            "matches_started": 0,
            "score_updates": 0,
            "matches_finished": 0,
            "summaries_served": 0,
            "rejections_by_type": {},
        }

    def _increment(self, key: str):
        with self._lock:
            self.metrics[key] += 1

    def record_match_started(self):
        self._increment("matches_started")

    def record_score_update(self):
        self._increment("score_updates")

    def record_match_finished(self):
        self._increment("matches_finished")

    def record_summary(self):
        self._increment("summaries_served")

    def record_rejection(self, error_type: str):
        """Count a rejected operation by error class name."""
        with self._lock:
            rejections = self.metrics["rejections_by_type"]
            rejections[error_type] = rejections.get(error_type, 0) + 1

    def get_metrics(self) -> dict:
        """Return a copy of current counters."""
        with self._lock:
            metrics_copy = self.metrics.copy()
            metrics_copy["rejections_by_type"] = dict(self.metrics["rejections_by_type"])
        metrics_copy["matches_active"] = (
            metrics_copy["matches_started"] - metrics_copy["matches_finished"]
        )
        return metrics_copy


# Global logger instance
_global_logger: Optional[StructuredLogger] = None


def get_logger(name: str = "scoreboard", **kwargs) -> StructuredLogger:
    """
    Get or create the global logger instance.

    Level and outputs come from SCOREBOARD_* settings unless overridden.
    With none set, nothing is installed beyond a NullHandler.

    Args:
        name: Logger name
        **kwargs: Additional arguments passed to StructuredLogger

    Returns:
        StructuredLogger instance
    """
    global _global_logger

    if _global_logger is None:
        settings = load_settings()
        kwargs.setdefault("level", settings.log_level)
        kwargs.setdefault("log_dir", settings.log_dir)
        kwargs.setdefault("enable_file", settings.log_dir is not None)
        kwargs.setdefault("enable_console", settings.log_to_console)
        _global_logger = StructuredLogger(name=name, **kwargs)

    return _global_logger


def reset_logger():
    """Reset the global logger and detach its handlers (useful for testing)."""
    global _global_logger
    if _global_logger is not None:
        _global_logger.close()
    _global_logger = None
