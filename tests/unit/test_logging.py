"""Unit tests for strseq.logging."""

import logging
from logging.handlers import MemoryHandler
from pathlib import Path

import pytest
from rich.logging import RichHandler

from strseq.logging import (
    LoggingSettings,
    ThirdPartyPrefixFilter,
    config_console_handler,
    config_flight_recorder,
    configure_logging,
    log_startup,
    verbosity_level,
)


def _record(name: str) -> logging.LogRecord:
    return logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)


@pytest.mark.parametrize(
    ("name", "prefix"),
    [
        ("sqlalchemy.engine.Engine", "[sqlalchemy]"),
        ("urllib3", "[urllib3]"),
        ("strseq.domain.sequence", ""),
        ("strseq", ""),
        ("strseqx.other", "[strseqx]"),
    ],
)
def test_third_party_prefix_filter(name, prefix):
    """Third-party records get a bracketed prefix; project records get none."""
    record = _record(name)
    assert ThirdPartyPrefixFilter().filter(record) is True
    assert record.prefix == prefix


def test_console_handler_default():
    """The console handler honors the level and filters third-party names."""
    handler = config_console_handler(level=logging.WARNING)
    assert isinstance(handler, RichHandler)
    assert handler.level == logging.WARNING
    assert any(isinstance(f, ThirdPartyPrefixFilter) for f in handler.filters)


def test_console_handler_debug_mode():
    """Debug mode forces DEBUG and drops the prefix filter."""
    handler = config_console_handler(level=logging.ERROR, debug_mode=True, color=False)
    assert handler.level == logging.DEBUG
    assert not handler.filters


def test_flight_recorder_flushes_on_warning(tmp_path: Path):
    """Buffered records reach the file once a WARNING is emitted."""
    path = tmp_path / "latest.log"
    handler = config_flight_recorder(path, capacity=10)
    target = handler.target
    logger = logging.getLogger("strseq.test.flight")
    logger.setLevel(logging.DEBUG)
    logger.addHandler(handler)
    try:
        logger.debug("buffered detail")
        assert not path.exists() or "buffered detail" not in path.read_text()
        logger.warning("trigger")
    finally:
        logger.removeHandler(handler)
        handler.close()
        target.close()
    text = path.read_text(encoding="utf-8")
    assert "buffered detail" in text
    assert "trigger" in text


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
def test_verbosity_level(verbose, quiet, expected):
    """-v/-q counts move one level per repetition and are clamped."""
    assert verbosity_level(verbose, quiet) == expected


@pytest.fixture
def restore_root_logging():
    """Put the root logger and touched loggers back after the test."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    touched = logging.getLogger("strseq.test.pinned")
    yield
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
    touched.setLevel(logging.NOTSET)


@pytest.mark.usefixtures("restore_root_logging")
def test_configure_logging_console_only():
    """Without a log path only the console handler is installed."""
    settings = LoggingSettings(
        level=logging.INFO, logger_levels={"strseq.test.pinned": logging.ERROR}
    )
    handlers = configure_logging(settings)
    assert [type(h) for h in handlers] == [RichHandler]
    assert logging.getLogger().handlers == handlers
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("strseq.test.pinned").level == logging.ERROR
    assert settings.flight_recorder is False


@pytest.mark.usefixtures("restore_root_logging")
def test_configure_logging_with_flight_recorder(tmp_path: Path):
    """A log path adds a MemoryHandler with the configured capacity."""
    settings = LoggingSettings(
        log_path=tmp_path / "latest.log",
        recorder_capacity=7,
        recorder_flush_on_close=True,
    )
    handlers = configure_logging(settings)
    recorder = handlers[1]
    assert isinstance(recorder, MemoryHandler)
    assert recorder.capacity == 7
    assert recorder.flushOnClose is True


def test_log_startup_summary_and_diagnostics(caplog: pytest.LogCaptureFixture):
    """Startup logs one INFO summary and DEBUG diagnostics."""
    logger = logging.getLogger("strseq.test.startup")
    settings = LoggingSettings(
        log_path=Path("/tmp/x.log"),
        recorder_capacity=10,
        logger_levels={"sqlalchemy": logging.WARNING},
    )
    with caplog.at_level(logging.DEBUG, logger="strseq.test.startup"):
        log_startup(
            logger,
            settings,
            [logging.NullHandler()],
            app_version="9.9.9",
            coercion_policy="strict",
        )
    infos = [r.getMessage() for r in caplog.records if r.levelno == logging.INFO]
    assert infos == [
        "strseq 9.9.9: console=WARNING, coercion=strict, flight-recorder=ON"
    ]
    assert "Handlers: ['NullHandler']" in caplog.text
    assert "capacity=10" in caplog.text
    assert "'sqlalchemy': 'WARNING'" in caplog.text


def test_log_startup_without_recorder(caplog: pytest.LogCaptureFixture):
    """With the recorder off the summary says so and no recorder line is logged."""
    logger = logging.getLogger("strseq.test.startup")
    with caplog.at_level(logging.DEBUG, logger="strseq.test.startup"):
        log_startup(
            logger, LoggingSettings(), [], app_version="1", coercion_policy="lenient"
        )
    assert "flight-recorder=OFF" in caplog.text
    assert "Flight recorder:" not in caplog.text
    assert "Per-logger overrides: <none>" in caplog.text
