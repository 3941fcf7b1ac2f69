"""Logging setup for snaprestore."""

import logging

from .config import AppSettings, get_settings

ROOT_LOGGER = "snaprestore"


def configure_logging(settings: AppSettings | None = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Safe to call more than once; the handler is only installed the first time.

    Args:
        settings: Optional settings (defaults to cached environment settings)

    Returns:
        The ``snaprestore`` logger
    """
    settings = settings or get_settings()
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel("DEBUG" if settings.debug else settings.log_level.upper())

    if not any(getattr(h, "_snaprestore", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(settings.log_format))
        handler._snaprestore = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger
