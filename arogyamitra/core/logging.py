"""
Application-wide logging setup.
"""
import logging
import sys

from .config import LOG_LEVEL


def setup_logging(level: str = LOG_LEVEL):
    """Configure the root logger with a single text handler on stdout."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    root_logger.addHandler(handler)

    # uvicorn access lines duplicate our request logging at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
