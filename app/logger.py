import logging
import os
import sys
from logging.handlers import TimedRotatingFileHandler
from typing import List, Optional

from colorlog import ColoredFormatter

LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}
CONSOLE_FORMAT = "%(log_color)s%(levelname)-8s [%(folder)s/%(filename)s:%(lineno)d] %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s [%(folder)s/%(filename)s:%(lineno)d] %(message)s"
LOG_FILE_NAME = "autoassist.log"


def _with_folder(record: logging.LogRecord) -> logging.LogRecord:
    record.folder = os.path.basename(os.path.dirname(record.pathname))
    return record


class ColoredCustomFormatter(ColoredFormatter):
    def format(self, record):
        return super().format(_with_folder(record))


class FolderFormatter(logging.Formatter):
    def format(self, record):
        return super().format(_with_folder(record))


def _console_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(ColoredCustomFormatter(CONSOLE_FORMAT, log_colors=LOG_COLORS))
    return handler


def _file_handler() -> Optional[logging.Handler]:
    log_dir = os.getenv("LOG_DIR", "logs")
    if not os.access(log_dir, os.W_OK):
        log_dir = "/tmp"
    try:
        os.makedirs(log_dir, exist_ok=True)
        handler = TimedRotatingFileHandler(
            filename=os.path.join(log_dir, LOG_FILE_NAME),
            when="midnight",
            backupCount=30,
            encoding="utf-8",
        )
    except OSError as e:
        logging.getLogger(__name__).warning("Failed to set up file logging: %s", e)
        return None
    handler.setLevel(logging.INFO)
    handler.setFormatter(FolderFormatter(FILE_FORMAT))
    return handler


class Logger:
    # every module logger writes through the same pair of handlers, so only
    # one handler ever rotates the log file
    _handlers: List[logging.Handler] = []

    @classmethod
    def _shared_handlers(cls) -> List[logging.Handler]:
        if not cls._handlers:
            cls._handlers.append(_console_handler())
            file_handler = _file_handler()
            if file_handler is not None:
                cls._handlers.append(file_handler)
        return cls._handlers

    @classmethod
    def get_logger(cls, name: str = None) -> logging.Logger:
        """
        Logger for ``name`` (usually ``__name__``), console plus daily file.

        Level comes from ``LOG_LEVEL``; defaults to DEBUG.
        """
        logger = logging.getLogger(name or os.getenv("PROJECT_NAME", "autoassist"))
        if not logger.handlers:
            logger.setLevel(os.getenv("LOG_LEVEL", "DEBUG").upper())
            for handler in cls._shared_handlers():
                logger.addHandler(handler)
        return logger
