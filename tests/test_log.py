"""Tests for log.py."""

import logging
import logging.handlers

import pytest
from pomotui import log


def file_handlers(logger):
    return [
        h for h in logger.handlers
        if isinstance(h, logging.handlers.RotatingFileHandler)
    ]


@pytest.fixture
def fresh_logger(monkeypatch):
    monkeypatch.setattr(log, "_logger", None)
    package_logger = logging.getLogger("pomotui")
    saved_handlers = list(package_logger.handlers)
    saved_level = package_logger.level
    saved_propagate = package_logger.propagate
    package_logger.handlers.clear()
    yield package_logger
    for handler in file_handlers(package_logger):
        handler.close()
    package_logger.handlers[:] = saved_handlers
    package_logger.setLevel(saved_level)
    package_logger.propagate = saved_propagate


class TestGetLogger:
    """Test the file logger."""

    def test_writes_to_log_dir(self, fresh_logger, tmp_path):
        """Records from module loggers land in the rotating file."""
        logger = log.get_logger(log_dir=tmp_path)
        logging.getLogger("pomotui.timer").info("Focus finished")
        for handler in file_handlers(logger):
            handler.flush()

        text = (tmp_path / "pomotui.log").read_text(encoding="utf-8")
        assert "Focus finished" in text
        assert "[pomotui.timer]" in text

    def test_singleton_and_debug_level(self, fresh_logger, tmp_path):
        """Later calls reuse the logger and update its level."""
        first = log.get_logger(log_dir=tmp_path)
        assert first.level == logging.INFO
        second = log.get_logger(debug=True)
        assert second is first
        assert second.level == logging.DEBUG
        assert len(file_handlers(second)) == 1

    def test_foreign_handler_does_not_block_file(self, fresh_logger, tmp_path):
        """An existing non-file handler still gets the file handler added."""
        fresh_logger.addHandler(logging.NullHandler())
        logger = log.get_logger(log_dir=tmp_path)
        assert len(file_handlers(logger)) == 1
        assert (tmp_path / "pomotui.log").exists()

