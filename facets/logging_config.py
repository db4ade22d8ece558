"""Logging configuration for the facet engine.

The ``facets`` logger carries only a NullHandler until ``setup_logging`` is
called, so importing the package never prints anything. Once enabled, records
go to a colored console handler and to a daily JSONL file.
"""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

from facets.config import LOG_DIR as CONFIGURED_LOG_DIR
from facets.config import LOG_LEVEL

__all__ = [
    "setup_logging",
    "get_logger",
    "log_facet_event",
    "LOG_DIR",
]

LOGGER_NAME = "facets"

LOG_DIR = (
    Path(CONFIGURED_LOG_DIR)
    if CONFIGURED_LOG_DIR
    else Path(__file__).parent.parent / "logs"
)


class JSONLFileHandler(logging.Handler):
    """Handler that appends one JSON object per record, one file per day."""

    def __init__(self, log_dir: Path, prefix: str = "facets"):
        super().__init__()
        self.log_dir = log_dir
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.prefix = prefix

    def _get_log_file(self) -> Path:
        today = datetime.now().strftime("%Y%m%d")
        return self.log_dir / f"{self.prefix}_{today}.jsonl"

    def emit(self, record: logging.LogRecord) -> None:
        try:
            entry = {
                "timestamp": datetime.now().isoformat(),
                "level": record.levelname,
                "logger": record.name,
                "message": record.getMessage(),
            }
            if hasattr(record, "event_type"):
                entry["event_type"] = record.event_type
            if hasattr(record, "extra_data"):
                entry.update(record.extra_data)

            with open(self._get_log_file(), "a", encoding="utf-8") as f:
                f.write(json.dumps(entry, ensure_ascii=False, default=str) + "\n")
        except Exception:
            self.handleError(record)


class ColoredConsoleHandler(logging.StreamHandler):
    """Console handler that colors the level name on terminals."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        if hasattr(self.stream, "isatty") and self.stream.isatty():
            color = self.COLORS.get(record.levelname, "")
            if color:
                text = text.replace(
                    f"[{record.levelname}]",
                    f"[{color}{record.levelname}{self.RESET}]",
                    1,
                )
        return text


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(
    level: Union[int, str, None] = None,
    log_to_file: bool = True,
    log_to_console: bool = True,
    log_dir: Optional[Path] = None,
) -> logging.Logger:
    """Enable logging for the facet engine.

    Args:
        level: Logging level or level name (default: FACETS_LOG_LEVEL, else INFO)
        log_to_file: Whether to write JSONL records
        log_to_console: Whether to log to stderr
        log_dir: Custom log directory (default: FACETS_LOG_DIR, else logs/)

    Returns:
        The configured ``facets`` logger
    """
    resolved = _resolve_level(level)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolved)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_to_console:
        console_handler = ColoredConsoleHandler(sys.stderr)
        console_handler.setLevel(resolved)
        console_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        logger.addHandler(console_handler)

    if log_to_file:
        file_handler = JSONLFileHandler(Path(log_dir) if log_dir else LOG_DIR)
        file_handler.setLevel(logging.DEBUG)
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Get a logger below the ``facets`` namespace.

    Args:
        name: Logger name (prefixed with 'facets.' unless it already is)

    Returns:
        Logger instance
    """
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def log_facet_event(
    event_type: str,
    data: Dict[str, Any],
    level: int = logging.DEBUG,
    logger: Optional[logging.Logger] = None,
) -> None:
    """Log a structured engine event.

    Args:
        event_type: Type of event (e.g., 'facets_built', 'filter_applied')
        data: Event-specific data; a "message" entry becomes the log message
        level: Log level
        logger: Logger to use (default: the ``facets`` logger)
    """
    logger = logger or get_logger()
    if not logger.isEnabledFor(level):
        return

    record = logger.makeRecord(
        logger.name,
        level,
        "(facets)",
        0,
        data.get("message", event_type),
        (),
        None,
    )
    record.event_type = event_type
    record.extra_data = {k: v for k, v in data.items() if k != "message"}
    logger.handle(record)
