"""
Tests for the logging configuration and helpers.
"""

import logging

import pytest

from tempfuzz.logging import (
    configure_logging,
    configure_logging_from_settings,
    get_logger,
    is_debug_mode,
    log_entry_exit,
    set_debug_mode,
)


@pytest.fixture
def restore_package_logger():
    """Undo configure_logging() side effects on the package logger."""
    package_logger = logging.getLogger("tempfuzz")
    handlers = package_logger.handlers[:]
    level = package_logger.level
    propagate = package_logger.propagate
    yield package_logger
    set_debug_mode(False)
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = propagate


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_console_only(self, restore_package_logger):
        """Without a directory only a console handler is installed."""
        configure_logging()
        handlers = restore_package_logger.handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)
        assert restore_package_logger.propagate is False

    def test_file_output(self, restore_package_logger, tmp_path):
        """A rotating file handler writes to tempfuzz.log."""
        configure_logging(log_dir=tmp_path / "logs")
        get_logger("tempfuzz.tests").warning("file output check")

        for handler in restore_package_logger.handlers:
            handler.flush()
        log_file = tmp_path / "logs" / "tempfuzz.log"
        assert log_file.exists()
        assert "file output check" in log_file.read_text()

    def test_reconfigure_does_not_duplicate_handlers(self, restore_package_logger):
        """Calling twice replaces the handlers."""
        configure_logging()
        configure_logging()
        assert len(restore_package_logger.handlers) == 1

    def test_debug_mode_from_config(self, restore_package_logger):
        """debug_mode in config turns the flag on."""
        configure_logging(config={"debug_mode": True})
        assert is_debug_mode()
        assert restore_package_logger.level == logging.DEBUG

    def test_from_settings(self, restore_package_logger, monkeypatch, tmp_path):
        """Settings drive the handler setup."""
        monkeypatch.setenv("TEMPFUZZ_LOGGING_LEVEL", "WARNING")
        monkeypatch.setenv("TEMPFUZZ_LOGGING_LOG_DIR", str(tmp_path))

        configure_logging_from_settings()

        levels = sorted(handler.level for handler in restore_package_logger.handlers)
        assert levels == [logging.DEBUG, logging.WARNING]
        assert (tmp_path / "tempfuzz.log").exists()


class TestDebugMode:
    """Tests for the global debug flag."""

    def test_toggle(self, restore_package_logger):
        """The flag follows set_debug_mode()."""
        set_debug_mode(True)
        assert is_debug_mode()
        set_debug_mode(False)
        assert not is_debug_mode()


class TestLogEntryExit:
    """Tests for the entry/exit decorator."""

    def test_logs_entry_exit_and_result(self, caplog):
        """Entry, exit and result are logged at DEBUG."""
        logger = logging.getLogger("tests.entry_exit")

        @log_entry_exit(logger=logger, log_args=True, log_result=True)
        def combine(a, b, scale=1):
            return (a + b) * scale

        with caplog.at_level(logging.DEBUG, logger="tests.entry_exit"):
            assert combine(1, 2, scale=3) == 9

        messages = [record.getMessage() for record in caplog.records]
        assert any("Entering" in m and "combine" in m and "scale=3" in m for m in messages)
        assert any("Exiting" in m and "with result: 9" in m for m in messages)

    def test_logs_and_reraises_errors(self, caplog):
        """Exceptions are logged and propagated."""
        logger = logging.getLogger("tests.entry_exit")

        @log_entry_exit(logger=logger)
        def fail():
            raise RuntimeError("boom")

        with caplog.at_level(logging.DEBUG, logger="tests.entry_exit"):
            with pytest.raises(RuntimeError):
                fail()

        errors = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert len(errors) == 1
        assert "boom" in errors[0].getMessage()

    def test_preserves_metadata(self):
        """functools.wraps keeps the name."""

        @log_entry_exit()
        def documented():
            """Docstring."""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring."
