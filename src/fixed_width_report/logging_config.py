"""
Logging configuration for the fixed-width report converter.

Diagnostics go to stderr so they never mix with report data. Messages
about a particular input row carry ``extra={"record_number": n}``; the
log file shows that number in its own column so skipped rows can be
found with grep.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

LOGGER_NAME = "fixed_width_report"

CONSOLE_FORMAT = "%(levelname)s: %(message)s"
VERBOSE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)-8s record=%(record_number)s %(message)s"


class RecordNumberFilter(logging.Filter):
    """Default ``record_number`` to "-" for messages not tied to a row."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "record_number"):
            record.record_number = "-"
        return True


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    verbose: bool = False,
) -> logging.Logger:
    """Configure the package logger for a CLI run.

    The console follows ``level``. The log file always records at least
    INFO, so the run summary is kept even when the console is quiet.

    Args:
        level: Console log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file
        verbose: If True, use the timestamped console format

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_level = getattr(logging, level.upper(), logging.INFO)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(
        logging.Formatter(VERBOSE_FORMAT if verbose else CONSOLE_FORMAT)
    )
    logger.addHandler(console_handler)
    logger_level = console_level

    if log_file:
        file_level = min(console_level, logging.INFO)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(file_level)
        file_handler.addFilter(RecordNumberFilter())
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)
        logger_level = file_level

    logger.setLevel(logger_level)
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger, e.g. ``fixed_width_report.main``."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
