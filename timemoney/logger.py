"""Logging setup shared by the tracker and its services."""
import logging
from logging.handlers import RotatingFileHandler

from timemoney.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s:%(filename)s:%(lineno)d] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER = "timemoney"


def setup_logging(
    settings: Settings,
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 5,
) -> logging.Logger:
    """
    Configure the package logger.

    Always attaches a console handler; attaches a rotating file handler when
    ``settings.log_file`` is set. Handlers are named so repeated calls do not
    stack duplicates.

    Args:
        settings: Application settings
        max_bytes: Rotation size for the file handler
        backup_count: Number of rotated files to keep

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(settings.log_level.upper())

    fmt = logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT)

    console_handler_name = f"{ROOT_LOGGER}:console"
    if not any(h.get_name() == console_handler_name for h in logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(fmt)
        console_handler.set_name(console_handler_name)
        logger.addHandler(console_handler)

    file_handler_name = f"{ROOT_LOGGER}:file"
    if settings.log_file and not any(h.get_name() == file_handler_name for h in logger.handlers):
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            filename=settings.log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(fmt)
        file_handler.set_name(file_handler_name)
        logger.addHandler(file_handler)

    return logger
