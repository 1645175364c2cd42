"""Logging setup for the chess_control package."""

import logging

from chess_control.config import Settings

PACKAGE_LOGGER = "chess_control"


class PackageHandler(logging.StreamHandler):
    """Stream handler installed by configure_logging()."""


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Attach a stream handler to the package logger at the configured level.

    Calling it twice does not add a second handler.
    """
    settings = settings or Settings()
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(settings.log_level)
    handler = next((h for h in logger.handlers if isinstance(h, PackageHandler)), None)
    if handler is None:
        handler = PackageHandler()
        logger.addHandler(handler)
    handler.setFormatter(logging.Formatter(settings.log_format))
    return logger
