"""Logging for MboaSMS.

Every module logs through get_logger(__name__), which places it under the
"mboasms" logger. setup_logging() attaches two handlers to that logger:

    - console: short human-readable lines
    - file: one JSON object per line, rotated at 5 MB

Structured fields go in extra={"context": {...}}; both formatters render
them. Phone numbers are logged normalized, never with credentials.

Usage:
    from src.core.logging import get_logger, setup_logging

    setup_logging(log_dir=config.log_path)
    logger = get_logger(__name__)
    logger.info("SMS submitted", extra={"context": {"carrier": "mtn"}})
"""

import json
import logging
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Optional

ROOT_LOGGER_NAME = "mboasms"
LOG_FILE_NAME = "mboasms.log"


def _context(record: logging.LogRecord) -> dict[str, Any]:
    return getattr(record, "context", None) or {}


class JSONFormatter(logging.Formatter):
    """One JSON document per record, for the log file."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "module": record.name,
            "message": record.getMessage(),
        }
        context = _context(record)
        if context:
            entry["context"] = context
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class ConsoleFormatter(logging.Formatter):
    """'HH:MM:SS LEVL logger: message [k=v, ...]' lines for the terminal."""

    def __init__(self) -> None:
        super().__init__(datefmt="%H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        line = (
            f"{self.formatTime(record, self.datefmt)} {record.levelname[:4]:4s} "
            f"{record.name}: {record.getMessage()}"
        )
        context = _context(record)
        if context:
            line += " [" + ", ".join(f"{k}={v}" for k, v in context.items()) + "]"
        return line


_logging_initialized = False


def setup_logging(
    log_dir: Optional[Path] = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> None:
    """Attach console and file handlers to the mboasms logger once.

    Args:
        log_dir: Directory for mboasms.log. Defaults to ~/.mboasms/logs
        console_level: Minimum level printed to the console
        file_level: Minimum level written to the file
    """
    global _logging_initialized
    if _logging_initialized:
        return

    log_dir = log_dir or Path.home() / ".mboasms" / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)

    console = logging.StreamHandler()
    console.setLevel(console_level)
    console.setFormatter(ConsoleFormatter())

    logfile = RotatingFileHandler(
        log_dir / LOG_FILE_NAME, maxBytes=5 * 1024 * 1024, backupCount=5, encoding="utf-8"
    )
    logfile.setLevel(file_level)
    logfile.setFormatter(JSONFormatter())

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(logging.DEBUG)
    root.addHandler(console)
    root.addHandler(logfile)

    _logging_initialized = True
    root.debug("Logging ready", extra={"context": {"log_dir": str(log_dir)}})


def get_logger(name: str) -> logging.Logger:
    """Return the mboasms child logger for a module name ('src.' dropped)."""
    if name.startswith("src."):
        name = name[len("src.") :]
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
