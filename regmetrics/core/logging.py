import logging
from logging.handlers import RotatingFileHandler

from .config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_handlers = [logging.StreamHandler()]
if settings.LCP_LOG_FILE:
    _handlers.append(
        RotatingFileHandler(
            settings.LCP_LOG_FILE,
            maxBytes=(10 * 1024 * 1024),   # 10MB per file
            backupCount=7,                 # Last 7 rotated logs kept
            encoding="utf-8"
        )
    )

# Python 'logging' root config
logging.basicConfig(
    level=getattr(logging, settings.LCP_LOG_LEVEL, logging.INFO),
    format=LOG_FORMAT,
    datefmt=DATE_FORMAT,
    handlers=_handlers
)


def get_logger(name: str) -> logging.Logger:
    """Return a configured logger with the given module name."""
    return logging.getLogger(name)
