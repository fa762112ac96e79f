"""Centralized logging configuration for boardplacer.

Logs go to the console (the workflow log when running as an action), with an
optional rotating file log.
"""

from __future__ import annotations

import logging
import os
import re
from logging.handlers import RotatingFileHandler
from pathlib import Path

DEFAULT_LOG_FILE = "boardplacer.log"
DEFAULT_MAX_BYTES = 5 * 1024 * 1024  # 5MB
DEFAULT_BACKUP_COUNT = 3
DEFAULT_LOG_LEVEL = "INFO"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_TOKEN_PATTERNS = [
    (r"ghp_[a-zA-Z0-9]{36}", "[GITHUB_TOKEN]"),  # GitHub PAT
    (r"gho_[a-zA-Z0-9]{36}", "[GITHUB_TOKEN]"),  # GitHub OAuth
    (r"ghs_[a-zA-Z0-9]{36}", "[GITHUB_TOKEN]"),  # Actions installation token
    (r"github_pat_[a-zA-Z0-9_]{82}", "[GITHUB_TOKEN]"),  # Fine-grained PAT
    (r"Bearer [a-zA-Z0-9._-]+", "Bearer [REDACTED]"),
]


class _RedactingFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        return sanitize_for_log(super().format(record))


def setup_logging(
    level: str | None = None,
    log_dir: str | Path | None = None,
    log_file: str = DEFAULT_LOG_FILE,
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
    console: bool = True,
) -> logging.Logger:
    """Set up logging for boardplacer.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to INFO.
               Can be overridden with BOARDPLACER_LOG_LEVEL environment variable.
        log_dir: Directory for a rotating log file. No file log when unset.
                 Can be set with BOARDPLACER_LOG_DIR environment variable.
        log_file: Log file name. Defaults to 'boardplacer.log'.
        max_bytes: Maximum size per log file before rotation.
        backup_count: Number of backup files to keep.
        console: Whether to log to the console. Defaults to True.

    Returns:
        The root boardplacer logger.
    """
    if level is None:
        level = os.environ.get("BOARDPLACER_LOG_LEVEL", DEFAULT_LOG_LEVEL)
    log_level = getattr(logging, level.upper(), logging.INFO)

    if log_dir is None:
        log_dir = os.environ.get("BOARDPLACER_LOG_DIR") or None

    logger = logging.getLogger("boardplacer")
    logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    formatter = _RedactingFormatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if log_dir is not None:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path / log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    logger.debug("boardplacer logging initialized (level=%s)", level)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a component, prefixed with 'boardplacer.'."""
    if not name.startswith("boardplacer."):
        name = f"boardplacer.{name}"
    return logging.getLogger(name)


def sanitize_for_log(text: str) -> str:
    """Remove GitHub tokens and bearer credentials from log output."""
    result = text
    for pattern, replacement in _TOKEN_PATTERNS:
        result = re.sub(pattern, replacement, result)
    return result
