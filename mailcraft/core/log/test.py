"""Tests for core logging module."""

import logging

import pytest

from .lib import get_logger, parse_level, setup_logging


class TestLogging:
    """Test core logging API."""

    @pytest.mark.unit
    def test_get_logger(self) -> None:
        """Verify logger instance creation."""
        logger = get_logger("test")
        assert logger.name == "test"
        assert isinstance(logger, logging.Logger)

    @pytest.mark.unit
    def test_get_logger_default_name(self) -> None:
        """Verify default logger name."""
        logger = get_logger()
        assert logger.name == "mailcraft"

    @pytest.mark.unit
    def test_setup_logging(self) -> None:
        """Logging setup accepts level names without raising."""
        setup_logging(level="debug")
        logger = get_logger("test_setup")
        logger.debug("test message")
        assert logger.level == logging.NOTSET  # Level is on the handler or root


class TestParseLevel:
    """Tests for level name conversion."""

    @pytest.mark.unit
    def test_numeric_passthrough(self) -> None:
        assert parse_level(logging.WARNING) == logging.WARNING

    @pytest.mark.unit
    def test_name_case_insensitive(self) -> None:
        assert parse_level("debug") == logging.DEBUG
        assert parse_level(" Error ") == logging.ERROR

    @pytest.mark.unit
    def test_unknown_name_defaults_to_info(self) -> None:
        assert parse_level("chatty") == logging.INFO
