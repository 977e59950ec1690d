"""
Centralized logging configuration for httpplus.

Library modules log through ``get_logger(__name__)`` only. Nothing is
printed unless the host application calls ``setup_logging`` or configures
the ``httpplus`` logger itself.
"""
import logging
import sys
from pathlib import Path
from typing import Optional

ROOT_LOGGER_NAME = "httpplus"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Silent by default
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def _parse_level(log_level: str) -> int:
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")
    return level


def setup_logging(log_level: str = "INFO", log_file: Optional[Path] = None) -> logging.Logger:
    """
    Attach console (and optionally file) handlers to the httpplus logger.

    Calling it again is a no-op once handlers are attached.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional log file path; the file always receives DEBUG

    Returns:
        The configured ``httpplus`` logger
    """
    level = _parse_level(log_level)
    root = logging.getLogger(ROOT_LOGGER_NAME)

    if any(not isinstance(handler, logging.NullHandler) for handler in root.handlers):
        return root

    root.setLevel(level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setLevel(level)
    stream_handler.setFormatter(formatter)
    root.addHandler(stream_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
        # The file wants everything; the stream handler keeps its own level
        root.setLevel(logging.DEBUG)

    return root


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Return a logger under the ``httpplus`` hierarchy.

    Args:
        name: Usually ``__name__``; names outside the package are nested
            under ``httpplus.``
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
