"""Unified macprefs logging configuration."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(
    log_file: Path | None = None,
    level: str = "INFO",
    max_bytes: int = 1024 * 1024,
    backup_count: int = 3,
) -> None:
    """Configure the `macprefs` logger with a rotating file handler.

    Args:
        log_file: Log file path. If None, uses macprefs.log in the home directory.
        level: Logging level name
        max_bytes: Rotate once the file reaches this size
        backup_count: Number of rotated files kept
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if log_file is None:
        from .get_home_dir import get_home_dir

        log_file = get_home_dir("macprefs.log")

    log_file.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger("macprefs")
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def reset_logging() -> None:
    """Detach all handlers so logging can be configured again (used by tests)."""
    global _CONFIGURED
    root_logger = logging.getLogger("macprefs")
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    _CONFIGURED = False
