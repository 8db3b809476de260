"""Logging setup for the CampusConnect backend.

Every module logs through `logging.getLogger(__name__)`, so all records land
under the `campusconnect` logger. `setup_logging` attaches a rotating file
handler (and optionally stderr) there, with a filter that scrubs bearer
tokens, JWTs and password fields before anything is written.
"""

from __future__ import annotations

import logging
import os
import re
from logging.handlers import RotatingFileHandler
from pathlib import Path

ROOT_LOGGER_NAME = "campusconnect"

DEFAULT_LOG_DIR = "logs"
DEFAULT_LOG_FILE = "campusconnect.log"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_BACKUP_COUNT = 5

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_REDACTIONS = [
    (re.compile(r"Bearer [A-Za-z0-9._-]+"), "Bearer [REDACTED]"),
    (re.compile(r"eyJ[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+"), "[JWT]"),
    (re.compile(r"token=[A-Za-z0-9._-]+"), "token=[REDACTED]"),
    (re.compile(r'"password"\s*:\s*"[^"]*"'), '"password": "[REDACTED]"'),
]


def sanitize_for_log(text: str) -> str:
    """Strip credentials from text before it is logged.

    Args:
        text: Text that may carry a bearer token, a JWT or a password field.

    Returns:
        The text with each credential replaced by a placeholder.
    """
    for pattern, replacement in _REDACTIONS:
        text = pattern.sub(replacement, text)
    return text


class RedactingFilter(logging.Filter):
    """Handler filter that runs every formatted message through sanitize_for_log."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        sanitized = sanitize_for_log(message)
        if sanitized != message:
            record.msg = sanitized
            record.args = None
        return True


def setup_logging(
    log_dir: str | Path | None = None,
    level: str | None = None,
    console: bool = True,
    log_file: str = DEFAULT_LOG_FILE,
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
) -> logging.Logger:
    """Configure the `campusconnect` logger.

    Args:
        log_dir: Directory for the log file. Falls back to CAMPUSCONNECT_LOG_DIR,
                 then 'logs'.
        level: Level name such as DEBUG or WARNING. Falls back to
               CAMPUSCONNECT_LOG_LEVEL, then INFO. Unknown names mean INFO.
        console: Also log to stderr.
        log_file: Log file name inside log_dir.
        max_bytes: Size at which the file is rotated.
        backup_count: Rotated files to keep.

    Returns:
        The `campusconnect` logger.
    """
    log_dir = Path(log_dir or os.environ.get("CAMPUSCONNECT_LOG_DIR", DEFAULT_LOG_DIR))
    log_dir.mkdir(parents=True, exist_ok=True)

    level = level or os.environ.get("CAMPUSCONNECT_LOG_LEVEL", DEFAULT_LOG_LEVEL)
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(log_level)

    # Calling again replaces the handlers instead of stacking them
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    log_path = log_dir / log_file
    handlers: list[logging.Handler] = [
        RotatingFileHandler(
            log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
    ]
    if console:
        handlers.append(logging.StreamHandler())

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    redactor = RedactingFilter()
    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        handler.addFilter(redactor)
        logger.addHandler(handler)

    logger.info("CampusConnect logging initialized (level=%s, file=%s)", level, log_path)
    return logger
