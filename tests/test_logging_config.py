import logging

import pytest

from affine2d import Vector
from affine2d.config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV, get_log_level
from affine2d.logging_config import setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("affine2d")
    yield logger
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def test_get_log_level_defaults_to_info(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    assert get_log_level() == DEFAULT_LOG_LEVEL == logging.INFO


def test_get_log_level_reads_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    assert get_log_level() == logging.DEBUG


def test_get_log_level_ignores_unknown_names(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
    assert get_log_level() == DEFAULT_LOG_LEVEL


def test_setup_logging_attaches_console_handler(package_logger, monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    setup_logging()
    assert package_logger.level == logging.INFO
    assert len(package_logger.handlers) == 1
    assert isinstance(package_logger.handlers[0], logging.StreamHandler)


def test_setup_logging_writes_to_file(package_logger, tmp_path):
    log_file = tmp_path / "affine2d.log"
    setup_logging(level=logging.DEBUG, log_file=str(log_file))

    assert package_logger.level == logging.DEBUG
    assert len(package_logger.handlers) == 2
    assert "Logging initialized." in log_file.read_text(encoding="utf-8")


def test_setup_logging_does_not_duplicate_handlers(package_logger):
    setup_logging(level=logging.WARNING)
    setup_logging(level=logging.WARNING)
    assert len(package_logger.handlers) == 1


def test_setup_logging_closes_previous_file_handler(package_logger, tmp_path):
    setup_logging(level=logging.INFO, log_file=str(tmp_path / "first.log"))
    first_file_handler = next(
        handler for handler in package_logger.handlers if isinstance(handler, logging.FileHandler)
    )

    setup_logging(level=logging.INFO, log_file=str(tmp_path / "second.log"))

    assert first_file_handler not in package_logger.handlers
    assert first_file_handler.stream is None
    assert len(package_logger.handlers) == 2


def test_degenerate_input_is_logged_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="affine2d"):
        Vector(0.0, 0.0).normalize()
    assert any("zero-length" in record.message for record in caplog.records)
    assert all(record.levelno == logging.DEBUG for record in caplog.records)
