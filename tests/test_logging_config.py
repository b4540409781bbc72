import logging
import logging.handlers
import sys

import pytest

from video_range_proxy.core.logging_config import ColoredFormatter, get_error_tracker, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level, excepthook = root.handlers[:], root.level, sys.excepthook
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    sys.excepthook = excepthook


def test_setup_logging_adds_console_and_rotating_file(restore_root_logger, tmp_path):
    log_file = tmp_path / "logs" / "proxy.log"

    setup_logging(log_level="debug", log_file=str(log_file))

    root = restore_root_logger
    assert root.level == logging.DEBUG
    assert [type(handler) for handler in root.handlers] == [
        logging.StreamHandler, logging.handlers.RotatingFileHandler
    ]
    assert isinstance(root.handlers[0].formatter, ColoredFormatter)
    assert log_file.exists()
    assert logging.getLogger("uvicorn").level == logging.INFO
    assert sys.excepthook is not sys.__excepthook__


def test_setup_logging_without_file_quiets_uvicorn(restore_root_logger):
    setup_logging(log_level="INFO")

    assert len(restore_root_logger.handlers) == 1
    assert logging.getLogger("uvicorn").level == logging.WARNING
    assert logging.getLogger("video_range_proxy.proxy").level == logging.INFO


def test_colored_formatter_leaves_record_plain():
    record = logging.makeLogRecord({"levelname": "WARNING", "levelno": logging.WARNING, "msg": "slow origin"})

    line = ColoredFormatter("%(levelname)s %(message)s").format(record)

    assert line == "\033[33mWARNING\033[0m slow origin"
    assert record.levelname == "WARNING"


def test_error_tracker_counts_errors_and_warnings(caplog):
    tracker = get_error_tracker("chunking_service")

    tracker.log_warning("ignoring unparseable range", context="range_parse")
    tracker.log_error(ValueError("boom"), context="window 0-10")

    stats = tracker.get_error_stats()
    assert stats["warning_count"] == 1
    assert stats["error_count"] == 1
    assert stats["last_error_time"] is not None
    messages = [record.getMessage() for record in caplog.records]
    assert "Warning in chunking_service (range_parse): ignoring unparseable range" in messages
    assert "Error in chunking_service (window 0-10): boom" in messages
