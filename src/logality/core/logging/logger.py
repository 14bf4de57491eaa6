"""
Internal diagnostics logging for Logality.

Logality reports on itself (logger construction, serializer faults, sink
failures) through structlog, routed to the standard library logger named
``logality``. These diagnostics go to stderr and never reach the sink that
log records are written to, and they do not propagate to the root logger.

Loggers are built with ``structlog.wrap_logger`` and carry their own
processor chain, so the process-wide structlog configuration belongs to the
host application and is never changed here. Handlers are attached on the
first diagnostic emitted, not at import time.

Configuration:
    - LOGALITY_LOG_LEVEL: Minimum diagnostics level (default: WARNING)
    - LOGALITY_DEBUG: Rich console output instead of JSON lines

Functions:
    setup_logging(): Configure the ``logality`` stdlib logger and renderer
    get_logger(name): Get a structlog logger for Logality's diagnostics

Example:
    >>> from logality.core.logging.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.warning("Serializer failed", key="user")
"""

import logging
import sys
from typing import Any, Optional

import structlog
from rich.console import Console
from rich.logging import RichHandler

from logality.core.config.settings import get_settings

_ROOT_LOGGER_NAME = "logality"
_HANDLER_TAG_ATTR = "_logality_handler"

_renderer: Optional[Any] = None


def setup_logging() -> None:
    """
    Attach the diagnostics handler to the ``logality`` stdlib logger.

    Safe to call more than once: handlers attached by a previous call are
    replaced rather than duplicated.

    Raises:
        ConfigurationError: If the LOGALITY_* environment is invalid
    """
    global _renderer

    settings = get_settings()

    if settings.DEBUG:
        handler: logging.Handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )
        _renderer = structlog.dev.ConsoleRenderer()
    else:
        handler = logging.StreamHandler(sys.stderr)
        _renderer = structlog.processors.JSONRenderer()
    handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(handler, _HANDLER_TAG_ATTR, True)

    package_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    for existing in list(package_logger.handlers):
        if getattr(existing, _HANDLER_TAG_ATTR, False):
            package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(settings.LOG_LEVEL)
    package_logger.propagate = False


def _ensure_setup(logger: Any, method_name: str, event_dict: dict) -> dict:
    if _renderer is None:
        setup_logging()
    return event_dict


def _render(logger: Any, method_name: str, event_dict: dict) -> Any:
    return _renderer(logger, method_name, event_dict)


_PROCESSORS = [
    _ensure_setup,
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="ISO"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
    _render,
]


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger for Logality's own diagnostics.

    Args:
        name (str): Logger name, typically __name__ of the calling module.
            Names outside the ``logality`` hierarchy are nested under it.

    Returns:
        structlog.stdlib.BoundLogger: Logger writing to the ``logality``
            diagnostics handler
    """
    if name != _ROOT_LOGGER_NAME and not name.startswith(_ROOT_LOGGER_NAME + "."):
        name = f"{_ROOT_LOGGER_NAME}.{name}"
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )
