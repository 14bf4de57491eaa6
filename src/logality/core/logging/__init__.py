"""
Logality internal diagnostics logging.

Logality's own warnings and debug output are structured with structlog and
written to stderr through the ``logality`` standard library logger. They are
kept separate from the JSON records a Logality instance writes to its sink.

Example:
    >>> from logality.core.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Logger created", app_name="api")
"""

from .logger import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
