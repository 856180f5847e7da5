"""Tests for logging setup."""

import logging
from pathlib import Path

from rich.logging import RichHandler

from podfeed.config.logging import setup_logging


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_console_handler(self, reset_podfeed_logger) -> None:
        """Test that a rich console handler is installed."""
        logger = setup_logging()

        assert logger.name == "podfeed"
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)

    def test_verbose_sets_debug(self, reset_podfeed_logger) -> None:
        """Test that verbose forces DEBUG."""
        logger = setup_logging(level="WARNING", verbose=True)
        assert logger.level == logging.DEBUG

    def test_level_name(self, reset_podfeed_logger) -> None:
        """Test explicit level names, case-insensitive."""
        assert setup_logging(level="error").level == logging.ERROR

    def test_log_file(self, tmp_path: Path, reset_podfeed_logger) -> None:
        """Test that records are written to the log file."""
        log_file = tmp_path / "logs" / "podfeed.log"
        logger = setup_logging(log_file=log_file)

        logging.getLogger("podfeed.feeds.renderer").info("rendered feed")
        for handler in logger.handlers:
            handler.flush()

        assert "rendered feed" in log_file.read_text()
        assert "podfeed.feeds.renderer" in log_file.read_text()

    def test_repeat_calls_replace_handlers(self, reset_podfeed_logger) -> None:
        """Test that calling twice does not duplicate handlers."""
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1
