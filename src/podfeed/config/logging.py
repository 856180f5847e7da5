"""Logging setup for podfeed."""

import logging
from pathlib import Path

from rich.logging import RichHandler

LOGGER_NAME = "podfeed"
FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(
    level: str = "INFO",
    verbose: bool = False,
    log_file: Path | None = None,
) -> logging.Logger:
    """Configure the podfeed logger.

    Console output goes through rich; an optional log file receives plain
    text records. Calling this again replaces previously installed handlers.

    Args:
        level: Log level name (ignored when verbose is set)
        verbose: Force DEBUG level
        log_file: Optional path to also write logs to

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else level.upper())

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(show_path=verbose, rich_tracebacks=True)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger
