import logging
from app.core.logging_config import get_logger


def test_get_logger_attaches_single_handler():
    logger = get_logger("tests.logging.single")
    get_logger("tests.logging.single")

    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert get_logger("tests.logging.debug").level == logging.DEBUG


def test_unknown_log_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    assert get_logger("tests.logging.chatty").level == logging.INFO
