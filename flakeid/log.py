"""Logger setup for the flakeid command line."""

import logging

from . import env

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = env.FLAKEID_LOG_LEVEL) -> logging.Logger:
    """
    Attach a console handler to the ``flakeid`` logger.

    Calling it again only updates the level; no second handler is added.

    Args:
        level: Level name such as "DEBUG" or "WARNING"

    Returns:
        logging.Logger: The package logger
    """
    package_logger = logging.getLogger("flakeid")
    package_logger.setLevel(level.upper())

    # Prevent duplicate logs if configured more than once
    if not package_logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(console_handler)

    package_logger.propagate = False
    return package_logger
