"""Tests for the logging setup."""

import logging
from pathlib import Path
from typing import Generator

import pytest

from robot_api.app.core.logging_config import PACKAGE_LOGGER, setup_logging


@pytest.fixture
def package_logger() -> Generator[logging.Logger, None, None]:
    """Restore the package logger's level and handlers after each test."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    level = logger.level
    handlers = list(logger.handlers)
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers = handlers
    logger.setLevel(level)


def test_returns_package_logger_with_level(package_logger: logging.Logger) -> None:
    logger = setup_logging("debug")

    assert logger is package_logger
    assert logger.level == logging.DEBUG
    assert logging.getLogger("robot_api.app.services.robot_store").getEffectiveLevel() == logging.DEBUG


def test_unknown_level_falls_back_to_info(package_logger: logging.Logger) -> None:
    assert setup_logging("chatty").level == logging.INFO


def test_log_file_receives_package_records_only(package_logger: logging.Logger, tmp_path: Path) -> None:
    log_path = tmp_path / "logs" / "robots.log"

    setup_logging("INFO", str(log_path))
    logging.getLogger("robot_api.app.services.robot_store").info("Created robot R1")
    logging.getLogger("uvicorn.access").warning("GET /robots 200")

    content = log_path.read_text(encoding="utf-8")
    assert "[INFO] robot_api.app.services.robot_store: Created robot R1" in content
    assert "GET /robots" not in content


def test_repeated_setup_adds_one_file_handler(package_logger: logging.Logger, tmp_path: Path) -> None:
    log_path = tmp_path / "robots.log"

    setup_logging("INFO", str(log_path))
    setup_logging("INFO", str(log_path))

    file_handlers = [h for h in package_logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
