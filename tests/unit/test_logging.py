"""Unit tests for studybook.logging."""

import logging
from logging.handlers import MemoryHandler

import pytest
from rich.logging import RichHandler

from studybook import logging as sb_logging

# pylint: disable=protected-access


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Put the root logger back the way the test found it."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestEffectiveLevel:
    """Tests for effective_level."""

    @staticmethod
    @pytest.mark.parametrize(
        ("verbose", "quiet", "expected"),
        [
            (0, 0, logging.WARNING),
            (1, 0, logging.INFO),
            (2, 0, logging.DEBUG),
            (5, 0, logging.DEBUG),
            (0, 1, logging.ERROR),
            (0, 9, logging.CRITICAL),
            (1, 1, logging.WARNING),
        ],
    )
    def test_levels(verbose, quiet, expected):
        """-v lowers and -q raises the threshold, clamped to the standard range."""
        assert sb_logging.effective_level(verbose, quiet) == expected


class TestThirdPartyPrefixFilter:
    """Tests for ThirdPartyPrefixFilter."""

    @staticmethod
    @pytest.mark.parametrize(
        ("name", "prefix"),
        [("studybook.parser", ""), ("click_extra.colorize", "[click_extra]"), ("rich", "[rich]")],
    )
    def test_prefix(name, prefix):
        """Only records from other libraries get a prefix; none are dropped."""
        record = logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)
        assert sb_logging.ThirdPartyPrefixFilter().filter(record)
        assert record.prefix == prefix


class TestHandlers:
    """Tests for the handler factories."""

    @staticmethod
    def test_console_handler():
        """The console handler writes through Rich at the requested level."""
        handler = sb_logging.config_console_handler(level=logging.INFO, color=False)
        assert isinstance(handler, RichHandler)
        assert handler.level == logging.INFO
        assert handler.formatter._fmt == sb_logging.CONSOLE_FORMAT

    @staticmethod
    def test_console_handler_debug_mode():
        """Debug mode forces DEBUG and the detailed format."""
        handler = sb_logging.config_console_handler(level=logging.ERROR, debug_mode=True)
        assert handler.level == logging.DEBUG
        assert handler.formatter._fmt == sb_logging.DEBUG_CONSOLE_FORMAT

    @staticmethod
    def test_flight_recorder_flushes_on_warning(tmp_path):
        """Buffered records reach the file once a WARNING arrives."""
        path = tmp_path / "logs" / "latest.log"
        recorder = sb_logging.config_flight_recorder(path, capacity=10)
        assert isinstance(recorder, MemoryHandler)

        def emit(level, msg):
            recorder.handle(
                logging.LogRecord("studybook.test", level, __file__, 1, msg, None, None)
            )

        emit(logging.DEBUG, "quiet detail")
        assert not path.exists()
        emit(logging.WARNING, "something broke")
        target = recorder.target
        recorder.close()
        target.close()
        text = path.read_text(encoding="utf-8")
        assert "quiet detail" in text
        assert "something broke" in text

    @staticmethod
    def test_flight_recorder_flush_on_close(tmp_path):
        """With flush_on_close the buffer is written on close."""
        path = tmp_path / "latest.log"
        recorder = sb_logging.config_flight_recorder(path, flush_on_close=True)
        recorder.handle(
            logging.LogRecord("studybook.test", logging.INFO, __file__, 1, "hello", None, None)
        )
        target = recorder.target
        recorder.close()
        target.close()
        assert "hello" in path.read_text(encoding="utf-8")


class TestConfigureLogging:
    """Tests for configure_logging and log_startup."""

    @staticmethod
    def test_installs_handlers(tmp_path):
        """Console and flight recorder are installed on the root logger."""
        handlers = sb_logging.configure_logging(
            level=logging.INFO,
            flight_recorder_path=tmp_path / "latest.log",
            logger_levels={"studybook.parser": logging.ERROR},
        )
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert [type(h) for h in handlers] == [RichHandler, MemoryHandler]
        assert all(h in root.handlers for h in handlers)
        assert logging.getLogger("studybook.parser").level == logging.ERROR
        logging.getLogger("studybook.parser").setLevel(logging.NOTSET)

    @staticmethod
    def test_without_flight_recorder():
        """Only the console handler is installed without a recorder path."""
        handlers = sb_logging.configure_logging(level=logging.WARNING)
        assert len(handlers) == 1

    @staticmethod
    def test_log_startup(caplog, tmp_path):
        """The startup summary and diagnostics are logged."""
        logger = logging.getLogger("studybook.test")
        with caplog.at_level(logging.DEBUG, logger="studybook.test"):
            sb_logging.log_startup(
                logger,
                app_version="0.1.0",
                level=logging.WARNING,
                handlers=[],
                data_path=tmp_path / "studybook.json",
                log_path=tmp_path / "latest.log",
                flight_recorder=True,
                flight_capacity=100,
                force_flush_fr=False,
                logger_levels={"studybook": logging.INFO},
            )
        messages = [rec.getMessage() for rec in caplog.records]
        assert "StudyBook 0.1.0 - console=WARNING, flight-recorder=ON" in messages
        assert f"Data file: {tmp_path / 'studybook.json'}" in messages
        assert "Per-logger overrides: {'studybook': 'INFO'}" in messages
        assert any(m.startswith("Flight recorder: path=") for m in messages)
