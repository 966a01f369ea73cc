import importlib
import logging

import logger


def test_telegram_logger_follows_log_level(monkeypatch):
    telegram_log = logging.getLogger("telegram")
    try:
        monkeypatch.setattr(logger.settings, "LOG_LEVEL", "ERROR")
        importlib.reload(logger)
        assert telegram_log.level == logging.ERROR

        monkeypatch.setattr(logger.settings, "LOG_LEVEL", "DEBUG")
        importlib.reload(logger)
        assert telegram_log.level == logging.INFO
    finally:
        monkeypatch.undo()
        importlib.reload(logger)
