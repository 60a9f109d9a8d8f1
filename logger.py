import logging
import os
import sys
from typing import Optional

class ColoredFormatter(logging.Formatter):
    """Formatter that colours console lines by log level."""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def format(self, record):
        message = super().format(record)
        color = self.COLORS.get(record.levelname)
        if color and getattr(sys.stdout, "isatty", lambda: False)():
            return f"{color}{message}{self.RESET}"
        return message

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

def _resolve_level(level) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO

def setup_logger(
    name: str = "study_assistant",
    level=None,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Configure the application logger.

    Level and file default to the LOG_LEVEL and LOG_FILE environment
    variables. Calling this again replaces the previous handlers.
    """
    level = _resolve_level(level if level is not None else os.getenv("LOG_LEVEL", "INFO"))
    log_file = log_file or os.getenv("LOG_FILE")

    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(ColoredFormatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)

    return logger

# Global logger instance
logger = setup_logger()
