"""
Logging configuration for the points-bank service.

Creates a rotating file logger under LOG_DIR plus a console handler for
warnings and above.
"""

import logging
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional

LOG_FILE_NAME = "points_bank.log"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

MAX_BYTES = 10 * 1024 * 1024  # 10 MB
BACKUP_COUNT = 5

SERVICE_LOGGER = "points_bank"


def _setup_file_logger(name: str, log_file: Path, level: int) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level)
    # Avoid duplicate handlers if setup_logging is called multiple times
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=MAX_BYTES,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)
    return logger


def setup_logging(level_name: str = "INFO", log_dir: Optional[str] = None) -> Path:
    """
    Configure root + service loggers. Returns the log file path.
    """
    level = getattr(logging, level_name.upper(), logging.INFO)

    directory = Path(log_dir or "logs")
    directory.mkdir(parents=True, exist_ok=True)
    log_file = directory / LOG_FILE_NAME

    logging.getLogger().setLevel(level)
    _setup_file_logger(SERVICE_LOGGER, log_file, level)

    # SQL echo is controlled by DB_ECHO; keep the engine logger quiet otherwise
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    return log_file


def get_logger(name: str) -> logging.Logger:
    """
    Convenience wrapper to get a named logger.
    """
    return logging.getLogger(name)
