"""
Tests for logging setup.
"""
import logging
import logging.handlers

import pytest

from kbheight.core.logging_config import get_logger, parse_log_level, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


def test_setup_logging_writes_rotating_log(tmp_path, restore_root_logger):
    root = setup_logging(log_dir=tmp_path / "logs", log_level="DEBUG")

    assert root.level == logging.DEBUG
    file_handlers = [h for h in root.handlers if isinstance(h, logging.handlers.RotatingFileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].backupCount == 5

    get_logger("kbheight.test").debug("hello from test")
    file_handlers[0].flush()

    assert "hello from test" in (tmp_path / "logs" / "kbheight.log").read_text(encoding="utf-8")


@pytest.mark.parametrize("level,expected", [
    (logging.WARNING, logging.WARNING),
    ("debug", logging.DEBUG),
    ("INFO", logging.INFO),
    ("nonsense", logging.INFO),
])
def test_parse_log_level(level, expected):
    assert parse_log_level(level) == expected
