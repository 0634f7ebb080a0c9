"""Configure loguru logging for the application."""

import sys

from loguru import logger

from popcorn.settings import CONFIG_DIR

LOGS_DIR = CONFIG_DIR / "logs"
LOG_FILE = LOGS_DIR / "app.log"


def setup_logging() -> None:
    LOGS_DIR.mkdir(parents=True, exist_ok=True)
    logger.remove()
    logger.add(sys.stderr, level="ERROR")
    logger.add(
        LOG_FILE,
        rotation="1 MB",
        retention=3,
        encoding="utf-8",
        level="DEBUG",
    )
