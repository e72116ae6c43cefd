"""Logging configuration helpers."""

import logging

DEFAULT_LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(level: str = "INFO", fmt: str = DEFAULT_LOG_FORMAT) -> None:
    """Configure the ``art_gallery`` logger with a single stream handler.

    Repeated calls update the level and format without adding handlers.
    """
    logger = logging.getLogger("art_gallery")
    logger.setLevel(level.upper())
    logger.propagate = False
    if not logger.handlers:
        logger.addHandler(logging.StreamHandler())
    for handler in logger.handlers:
        handler.setFormatter(logging.Formatter(fmt))
