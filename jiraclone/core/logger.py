# jiraclone/core/logger.py
import sys
from loguru import logger
from jiraclone.core.config import settings

LOG_DIR = settings.log_dir_path
LOG_FILE = LOG_DIR / "jiraclone_server.log"

def setup_logging() -> str:
    """
    Configure loguru sinks.
    - Console: settings.LOG_LEVEL and above
    - File: DEBUG and above, rotated daily
    """
    LOG_DIR.mkdir(parents=True, exist_ok=True)

    # drop the default sink so repeated calls don't duplicate output
    logger.remove()

    logger.add(
        sys.stderr,
        level=settings.LOG_LEVEL,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
    )

    # - rotate at midnight
    # - keep 10 days, zip old files
    # - enqueue=True for thread/process safety
    logger.add(
        str(LOG_FILE),
        rotation="00:00",
        retention="10 days",
        compression="zip",
        level="DEBUG",
        enqueue=True,
        encoding="utf-8",
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{line} - {message}"
    )

    return str(LOG_FILE)
