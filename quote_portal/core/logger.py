import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
import sys

from quote_portal.core.config import settings

LOG_DIR = Path(settings.LOG_DIR)
LOG_DIR.mkdir(parents=True, exist_ok=True)

LOG_FILE = LOG_DIR / "quote_portal.log"
LOG_FORMAT = "%(levelname)s | %(asctime)s | %(name)s | %(message)s"
LOG_LEVEL = getattr(logging, settings.LOG_LEVEL)


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)

    # Handlers are attached once per logger name
    if not logger.handlers:
        formatter = logging.Formatter(LOG_FORMAT)

        file_handler = RotatingFileHandler(
            LOG_FILE, maxBytes=2_000_000, backupCount=3, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(LOG_LEVEL)

        try:
            console_stream = open(sys.stdout.fileno(), mode="w", encoding="utf-8", closefd=False)
        except (AttributeError, OSError, ValueError):
            # stdout replaced by something without a real descriptor (pytest capture)
            console_stream = sys.stdout

        console_handler = logging.StreamHandler(console_stream)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(LOG_LEVEL)

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)
        logger.setLevel(LOG_LEVEL)
        logger.propagate = False

    return logger
