"""Process-wide holder for the application logger."""

from __future__ import annotations

import logging

__all__ = ["get_logger", "set_logger"]

_logger: logging.Logger | None = None


def set_logger(logger: logging.Logger | None) -> None:
    """Install ``logger`` as the application logger."""
    global _logger
    _logger = logger


def get_logger() -> logging.Logger | None:
    """Return the application logger, or ``None`` if none was set."""
    return _logger