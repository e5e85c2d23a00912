import logging

from hashcontract.logging import get_logger


class TestGetLogger:
    def test_default_level_is_warning(self, monkeypatch):
        monkeypatch.delenv("HASHCONTRACT_LOG_LEVEL", raising=False)
        logger = get_logger("hashcontract.tests.default_level")
        assert logger.level == logging.WARNING

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("HASHCONTRACT_LOG_LEVEL", "debug")
        logger = get_logger("hashcontract.tests.env_override")
        assert logger.level == logging.DEBUG

    def test_invalid_env_falls_back(self, monkeypatch):
        monkeypatch.setenv("HASHCONTRACT_LOG_LEVEL", "chatty")
        logger = get_logger("hashcontract.tests.invalid_env")
        assert logger.level == logging.WARNING

    def test_single_handler(self):
        first = get_logger("hashcontract.tests.single_handler")
        second = get_logger("hashcontract.tests.single_handler")
        assert first is second
        assert len(second.handlers) == 1
