# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-12
# Description: logging_utils.py
# -----------------------------------------------------------------------------
import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

import colorlog

BASE_LOGGER_NAME = "gix_rag"
DATEFMT = "%Y-%m-%d %H:%M:%S"


def _console_handler() -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setFormatter(colorlog.ColoredFormatter(
        fmt="%(log_color)s%(asctime)s [%(levelname)s] %(name)s:%(lineno)d:%(reset)s %(message)s",
        datefmt=DATEFMT,
        log_colors={
            "DEBUG": "cyan",
            "INFO": "green",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "bold_red",
        },
    ))
    return handler


def _file_handler() -> logging.Handler | None:
    """Rotating file log, only when GIX_LOG_TO_FILE is set (containers log to stdout)."""
    if os.getenv("GIX_LOG_TO_FILE", "0").lower() not in ("1", "true", "yes", "y"):
        return None

    log_path = Path(os.getenv("GIX_LOG_FILE", "./logs/gix_rag.log"))
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        filename=str(log_path),
        maxBytes=int(os.getenv("GIX_LOG_MAX_BYTES", str(5 * 1024 * 1024))),
        backupCount=int(os.getenv("GIX_LOG_BACKUP_COUNT", "5")),
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s",
        datefmt=DATEFMT,
    ))
    return handler


def _create_logger(full_name: str) -> logging.Logger:
    logger = logging.getLogger(full_name)
    if logger.handlers:
        return logger

    logger.addHandler(_console_handler())
    file_handler = _file_handler()
    if file_handler is not None:
        logger.addHandler(file_handler)

    level_name = os.getenv("GIX_LOG_LEVEL", "INFO").upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))
    logger.propagate = False
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Module-level logger, e.g. get_logger(__name__) -> gix_rag.api.routers.chat
    """
    return _create_logger(f"{BASE_LOGGER_NAME}.{name}" if name else BASE_LOGGER_NAME)


def get_class_logger(cls: type) -> logging.Logger:
    """
    Logger named after module + class, e.g.:

      gix_rag.services.GixChatService.GixChatService
      gix_rag.embedding.GixEmbedder.GixEmbedder
    """
    module = getattr(cls, "__module__", "unknown_module")
    classname = getattr(cls, "__name__", "UnknownClass")
    return _create_logger(f"{BASE_LOGGER_NAME}.{module}.{classname}")
