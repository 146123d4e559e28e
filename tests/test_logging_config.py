import io
import logging

import pytest

from textadventure.logging_config import configure_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("textadventure")
    saved_level, saved_handlers = logger.level, list(logger.handlers)
    yield logger
    logger.setLevel(saved_level)
    logger.handlers[:] = saved_handlers


def test_records_go_to_given_stream(package_logger, monkeypatch):
    monkeypatch.delenv("TA_LOG_LEVEL", raising=False)
    stream = io.StringIO()

    assert configure_logging(logging.INFO, stream=stream) == logging.INFO
    logging.getLogger("textadventure.game").info("Round %d complete", 3)
    logging.getLogger("textadventure.game").debug("hidden")

    output = stream.getvalue()
    assert "INFO" in output
    assert "textadventure.game: Round 3 complete" in output
    assert "hidden" not in output


def test_env_var_overrides_level(package_logger, monkeypatch):
    monkeypatch.setenv("TA_LOG_LEVEL", "debug")
    assert configure_logging(logging.WARNING, stream=io.StringIO()) == logging.DEBUG


def test_unknown_env_level_falls_back(package_logger, monkeypatch):
    monkeypatch.setenv("TA_LOG_LEVEL", "chatty")
    assert configure_logging(logging.WARNING, stream=io.StringIO()) == logging.WARNING


def test_repeated_calls_keep_one_handler(package_logger, monkeypatch):
    monkeypatch.delenv("TA_LOG_LEVEL", raising=False)
    configure_logging(stream=io.StringIO())
    configure_logging(stream=io.StringIO())
    assert len(package_logger.handlers) == 1
