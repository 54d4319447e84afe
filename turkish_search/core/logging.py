"""Logging setup"""
import logging
import sys

from turkish_search.core.config import settings


IS_PRODUCTION = settings.environment == "production"


def setup_logging() -> logging.Logger:
    """Initialise and configure the service logger"""

    logger = logging.getLogger("turkish_search")

    # No DEBUG output in production
    log_level = settings.log_level.upper()
    if IS_PRODUCTION and log_level == "DEBUG":
        log_level = "INFO"

    logger.setLevel(getattr(logging, log_level))

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, log_level))

    if IS_PRODUCTION:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

    console_handler.setFormatter(formatter)

    if not logger.handlers:
        logger.addHandler(console_handler)

    return logger


logger = setup_logging()


def sanitize_for_log(value: str, max_length: int = 100) -> str:
    """Return a log-safe rendition of raw user input

    Args:
        value: raw string (search query, barcode, ...)
        max_length: maximum length kept

    Returns:
        printable, truncated string
    """
    if not value:
        return "[empty]"

    # Keep log lines single-line
    result = "".join(ch if ch.isprintable() else " " for ch in str(value))

    if len(result) > max_length:
        result = result[:max_length] + "..."

    return result
