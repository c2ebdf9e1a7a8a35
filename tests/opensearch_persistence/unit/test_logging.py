"""Unit tests for logging setup."""

import io
import logging
from collections.abc import Generator

import pytest

from opensearch_persistence.logging import PACKAGE_LOGGER, LogLevel, get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_package_logger() -> Generator[None, None, None]:
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging."""

    def test_module_records_reach_stream(self) -> None:
        """Test that module loggers write through the package handler."""
        stream = io.StringIO()
        setup_logging(LogLevel.DEBUG, include_timestamp=False, stream=stream)

        get_logger("opensearch_persistence.services.store_service").debug("Saved document 1")

        assert stream.getvalue() == "opensearch_persistence.services.store_service  DEBUG  Saved document 1\n"

    def test_level_from_string(self) -> None:
        """Test that string levels are accepted case-insensitively."""
        logger = setup_logging("warning", stream=io.StringIO())

        assert logger.name == PACKAGE_LOGGER
        assert logger.level == logging.WARNING

    def test_repeated_setup_replaces_handler(self) -> None:
        """Test that calling setup twice does not duplicate output."""
        stream = io.StringIO()
        setup_logging(include_timestamp=False, stream=io.StringIO())
        setup_logging(include_timestamp=False, stream=stream)

        get_logger(PACKAGE_LOGGER).info("once")

        assert stream.getvalue().count("once") == 1

    def test_root_logger_untouched(self) -> None:
        """Test that the root logger configuration is left alone."""
        root_handlers = list(logging.getLogger().handlers)

        setup_logging(stream=io.StringIO())

        assert logging.getLogger().handlers == root_handlers
