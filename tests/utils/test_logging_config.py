# File: tests/utils/test_logging_config.py
"""Tests for the logging setup."""

import logging
import os

import pytest

from wall_level_splitter.utils.logging_config import (
    WallSplitterLogger,
    configure_from_env,
    get_logger,
)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestLogging:
    """Tests for logger configuration."""

    def test_trace_method_added(self):
        logger = get_logger("wall_level_splitter.test")

        assert hasattr(logger, "trace")
        assert logging.getLevelName(WallSplitterLogger.TRACE_LEVEL) == "TRACE"

    def test_explicit_level(self):
        logger = get_logger("wall_level_splitter.test.level", logging.WARNING)

        assert logger.level == logging.WARNING

    def test_console_only(self, restore_root_logger):
        log_file = WallSplitterLogger.configure(debug_mode=True, console_only=True)

        assert log_file is None
        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 1

    def test_file_output(self, restore_root_logger, tmp_path):
        log_file = WallSplitterLogger.configure(log_dir=str(tmp_path))

        assert os.path.dirname(log_file) == str(tmp_path)
        assert os.path.basename(log_file).startswith("wall_split_")
        for handler in restore_root_logger.handlers:
            if isinstance(handler, logging.FileHandler):
                handler.close()

    def test_configure_from_env(self, restore_root_logger, monkeypatch):
        monkeypatch.setenv("WALL_SPLITTER_DEBUG", "true")
        monkeypatch.delenv("WALL_SPLITTER_LOG_FILE", raising=False)

        assert configure_from_env() is None
        assert restore_root_logger.level == logging.DEBUG
