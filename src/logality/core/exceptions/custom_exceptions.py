"""
Exception hierarchy for Logality.

Every failure a log call can report is raised as one of the classes below.
Each exception carries a human-readable message, a machine-readable error
code and a details dictionary describing where in the dispatch pipeline the
call failed.

Exception Hierarchy:
    LogalityError (base)
    ├── ConfigurationError: Invalid construction options or runtime setup
    │   └── InvalidLevelError: Unknown severity name passed to a log call
    ├── SerializerError: A context serializer faulted on its input
    └── OutputError: The sink or output function rejected an awaited write

Wrapped failures keep the original exception as ``__cause__`` and reuse its
message, so callers can match on ``str(exc)`` without unwrapping.

Example:
    >>> try:
    ...     await log.info("hello", {"custom": payload})
    ... except OutputError as e:
    ...     print(e.message, e.details["state"])
    >>>
    >>> raise SerializerError(
    ...     "user serializer failed",
    ...     error_code="SERIALIZER_FAILED",
    ...     details={"key": "user"},
    ... )
"""

from typing import Any, Dict, Optional


class LogalityError(Exception):
    """
    Base exception class for all Logality errors.

    Attributes:
        message (str): Human-readable error description
        error_code (str): Machine-readable error identifier
        details (Dict[str, Any]): Additional contextual information

    The error_code defaults to the class name when not given. The details
    dictionary typically holds:
        - level: the severity name the call was made with
        - key: the context key whose serializer failed
        - state: the dispatch state the call failed in

    Example:
        >>> raise LogalityError(
        ...     "Sink write failed",
        ...     error_code="OUTPUT_FAILED",
        ...     details={"state": "writing"},
        ... )
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ConfigurationError(LogalityError):
    """
    Raised when logger configuration or setup is invalid.

    Common scenarios:
        - A serializer override that is not callable
        - A stream without a ``write`` method
        - Registering a serializer after the registry is frozen
        - Async mode used without a running event loop
    """

    pass


class InvalidLevelError(ConfigurationError):
    """Raised when a log call names a level outside the severity table"""

    pass


class SerializerError(LogalityError):
    """
    Raised when a registered serializer faults on its input.

    The message is the original exception's message; the original exception
    is chained as ``__cause__``. No record is written when this is raised.
    """

    pass


class OutputError(LogalityError):
    """Raised when the sink fails during an awaited (async mode) write"""

    pass
