"""Logging setup for the application."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
ROOT_LOGGERS = ("components", "restapi")


def configure_logging(level: str = "INFO") -> None:
    """Attach a single stream handler to the application logger trees."""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    for name in ROOT_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(level.upper())
        # Repeated app creation (tests, reload) must not stack handlers
        logger.handlers = [handler]
        logger.propagate = False
