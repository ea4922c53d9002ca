"""Logging configuration for the application."""

import logging
import sys

from ..config.environment import LOG_LEVEL

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: str = LOG_LEVEL):
    """Configure logging for the application.

    Safe to call more than once; the console handler is only added once.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if not any(getattr(h, '_community_events', False) for h in root_logger.handlers):
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        console_handler._community_events = True
        root_logger.addHandler(console_handler)

    # Set higher log levels for noisy components
    logging.getLogger('uvicorn.access').setLevel(logging.WARNING)
    logging.getLogger('httpx').setLevel(logging.WARNING)
