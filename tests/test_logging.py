"""Tests for logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from src.utils.logging import BackendFilter, level_from_name, setup_logging


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way the test found it."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_backend_filter_sets_default():
    """Test records without backend context get a placeholder."""
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    assert BackendFilter().filter(record) is True
    assert record.backend == "-"


def test_backend_filter_keeps_value():
    """Test an explicit backend is preserved."""
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    record.backend = "newrelic"
    BackendFilter().filter(record)
    assert record.backend == "newrelic"


def test_setup_logging_rich_handler(restore_root_logger):
    """Test a rich handler is installed at the requested level."""
    setup_logging(level=logging.DEBUG)

    root = restore_root_logger
    assert root.level == logging.DEBUG
    assert any(isinstance(h, RichHandler) for h in root.handlers)


def test_setup_logging_file(restore_root_logger, tmp_path):
    """Test the file handler writes the backend field."""
    log_file = tmp_path / "monitoring.log"
    setup_logging(level=logging.INFO, log_file=str(log_file))

    logging.getLogger("src.test").info("agent probed", extra={"backend": "recording"})
    for handler in restore_root_logger.handlers:
        handler.flush()

    content = log_file.read_text(encoding="utf-8")
    assert "agent probed" in content
    assert "| recording |" in content


def test_level_from_name():
    """Test level name resolution."""
    assert level_from_name("debug") == logging.DEBUG
    assert level_from_name("WARNING") == logging.WARNING
    assert level_from_name("nonsense") == logging.INFO
