"""Tests for logger configuration."""
import logging
from hirapractice.logger import _level_from_env, logger


class TestLogLevel:

    def test_default_level(self, monkeypatch):
        monkeypatch.delenv("HIRAPRACTICE_LOG_LEVEL", raising=False)
        assert _level_from_env() == logging.INFO

    def test_level_from_env(self, monkeypatch):
        monkeypatch.setenv("HIRAPRACTICE_LOG_LEVEL", "debug")
        assert _level_from_env() == logging.DEBUG

    def test_invalid_level_falls_back(self, monkeypatch):
        monkeypatch.setenv("HIRAPRACTICE_LOG_LEVEL", "LOUD")
        assert _level_from_env() == logging.INFO

    def test_handlers_split_by_level(self):
        levels = {handler.level for handler in logger.handlers}
        assert logging.WARNING in levels
