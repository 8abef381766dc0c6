"""Structured logging for loriapi."""

from loriapi.logging.setup import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
