"""Tests for logger utility."""

import logging
import sys

import pytest

import revreader
from revreader.config import Settings
from revreader.utils import logger as logger_module
from revreader.utils.logger import (
    get_app_logger,
    init_app_logger,
    setup_logger,
    shutdown_app_logger,
)


@pytest.fixture
def reset_app_logger():
    """Drop the handlers a test attached to the package logger."""
    yield
    shutdown_app_logger()


def output_handlers(logger):
    return [h for h in logger.handlers if not isinstance(h, logging.NullHandler)]


class TestSetupLogger:
    """SUT: setup_logger"""

    def test_returns_logger(self):
        """Should return a Logger instance."""
        logger = setup_logger("test_logger_returns")
        assert isinstance(logger, logging.Logger)

    def test_with_level(self):
        """Setting DEBUG level should take effect."""
        logger = setup_logger("test_logger_level", log_level="DEBUG")
        assert logger.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self):
        """An unknown level name should fall back to INFO."""
        logger = setup_logger("test_logger_unknown_level", log_level="LOUD")
        assert logger.level == logging.INFO

    def test_no_duplicate_handlers(self):
        """Calling multiple times should not add duplicate handlers."""
        name = "test_logger_dup"
        logger1 = setup_logger(name)
        handler_count = len(logger1.handlers)
        logger2 = setup_logger(name, log_level="WARNING")
        assert len(logger2.handlers) == handler_count
        assert logger1 is logger2
        assert all(h.level == logging.WARNING for h in logger2.handlers)

    def test_console_goes_to_stderr(self):
        """Records are printed on stdout, so logs must not share it."""
        logger = setup_logger("test_logger_stderr")
        assert logger.handlers[0].stream is sys.stderr

    def test_null_handler_does_not_block_setup(self):
        logger = logging.getLogger("test_logger_null")
        logger.addHandler(logging.NullHandler())

        setup_logger("test_logger_null")
        assert len(output_handlers(logger)) == 1

    def test_file_handler(self, tmp_path):
        """A log file in a new directory should be created and written."""
        log_file = tmp_path / "logs" / "reader.log"
        logger = setup_logger("test_logger_file", log_file=str(log_file))
        logger.info("hello file")

        for handler in logger.handlers:
            handler.flush()
        assert "hello file" in log_file.read_text()

        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()


class TestPackageLogger:
    """SUT: revreader package logger"""

    def test_silent_until_configured(self, reset_app_logger):
        """Importing the package installs only a NullHandler."""
        package_logger = logging.getLogger(revreader.__name__)
        assert any(isinstance(h, logging.NullHandler) for h in package_logger.handlers)
        assert output_handlers(package_logger) == []


class TestInitAppLogger:
    """SUT: init_app_logger"""

    def test_init_from_settings(self, reset_app_logger):
        """init_app_logger should apply the configured level."""
        settings = Settings(_env_file=None, log_level="DEBUG")
        logger = init_app_logger(settings)

        assert logger.level == logging.DEBUG
        assert get_app_logger() is logger

    def test_level_override(self, reset_app_logger):
        settings = Settings(_env_file=None, log_level="DEBUG")
        logger = init_app_logger(settings, log_level="ERROR")
        assert logger.level == logging.ERROR

    def test_log_file_from_settings(self, reset_app_logger, tmp_path):
        log_file = tmp_path / "revreader.log"
        logger = init_app_logger(Settings(_env_file=None, log_file=str(log_file)))
        logger.info("configured")

        for handler in logger.handlers:
            handler.flush()
        assert "configured" in log_file.read_text()

    def test_library_loggers_propagate(self, reset_app_logger):
        """Reader module loggers are children of the app logger."""
        app = init_app_logger(Settings(_env_file=None))
        child = logging.getLogger("revreader.reader.reverse_reader")
        parent = child.parent
        while parent is not None and parent is not app:
            parent = parent.parent
        assert parent is app

    def test_module_loggers_follow_package_level(self, reset_app_logger):
        """A module logger muted earlier inherits the package level again."""
        child = logging.getLogger("revreader.reader.scanner")
        child.setLevel(logging.CRITICAL)
        child.propagate = False

        init_app_logger(Settings(_env_file=None, log_level="DEBUG"))

        assert child.level == logging.NOTSET
        assert child.propagate
        assert child.getEffectiveLevel() == logging.DEBUG

    def test_reader_logs_reach_package_handlers(self, reset_app_logger, make_file, open_reader, caplog):
        init_app_logger(Settings(_env_file=None, log_level="DEBUG"))
        with caplog.at_level(logging.DEBUG, logger="revreader"):
            reader = open_reader(make_file("a\nb"))
            reader.reverse_read("\n")
            reader.truncate()

        names = {record.name for record in caplog.records}
        assert "revreader.reader.reverse_reader" in names
        assert "[ReverseTextReader] truncated" in caplog.text


class TestShutdownAppLogger:
    """SUT: shutdown_app_logger"""

    def test_removes_output_handlers(self):
        init_app_logger(Settings(_env_file=None))
        shutdown_app_logger()

        package_logger = logging.getLogger("revreader")
        assert output_handlers(package_logger) == []
        assert any(isinstance(h, logging.NullHandler) for h in package_logger.handlers)
        assert logger_module.app_logger is None


class TestGetAppLogger:
    """SUT: get_app_logger"""

    def test_default(self, reset_app_logger):
        """Should return a logger even when not explicitly initialized."""
        logger_module.app_logger = None
        logger = get_app_logger()
        assert isinstance(logger, logging.Logger)
        assert logger.name == "revreader"
