"""Logging helpers shared across the package."""

from __future__ import annotations

import logging

from ..config import LOGGER_NAMESPACE

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger below the package namespace.

    ``get_logger("settings")`` and ``get_logger("tilewindow.settings")`` both
    resolve to the same ``tilewindow.settings`` logger.
    """

    if not name or name == LOGGER_NAMESPACE:
        return logging.getLogger(LOGGER_NAMESPACE)
    if name.startswith(LOGGER_NAMESPACE + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a stderr handler to the package logger once."""

    logger = get_logger()
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(getattr(handler, "_tilewindow", False) for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._tilewindow = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger


__all__ = ["configure_logging", "get_logger"]
