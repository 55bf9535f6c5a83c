"""
Logging configuration for the robot registry.

Every module logs through ``logging.getLogger(__name__)``, so all
records of this project live under the ``robot_api`` package logger.
``setup_logging`` configures that logger:

* its level follows the ``LOG_LEVEL`` setting, even when a host
  process (uvicorn, pytest) already configured the root logger;
* an optional log file receives the ``robot_api`` records only, not
  the access logs or library chatter that reach the root logger;
* a console handler is installed on the root logger only when nothing
  else has configured it.

Calling ``setup_logging`` repeatedly (``create_app`` runs once per test)
never stacks duplicate handlers.
"""

import logging
from pathlib import Path
from typing import Optional


PACKAGE_LOGGER = "robot_api"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure the ``robot_api`` logger and return it.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file that receives the project's log records.
        Missing parent directories are created.  Passing the same path
        again does not add a second handler.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(numeric_level)

    root = logging.getLogger()
    if not root.handlers:
        root.setLevel(numeric_level)
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if logfile:
        _add_file_handler(package_logger, Path(logfile).resolve(), formatter)
    return package_logger


def _add_file_handler(logger: logging.Logger, log_path: Path, formatter: logging.Formatter) -> None:
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == log_path:
            return
    log_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)
