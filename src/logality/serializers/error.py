"""
Default serializer for exceptions.

Produces the ``event.error`` shape: the exception class name, its message,
and a backtrace of ``{file, function, line}`` frames taken from the
exception's traceback, innermost call first. An exception that was never
raised has no traceback and gets an empty backtrace.
"""

import traceback
from typing import Any, Dict, List

from logality.serializers.base import SerializedValue


def _backtrace(error: Any) -> List[Dict[str, Any]]:
    tb = getattr(error, "__traceback__", None)
    if tb is None:
        return []

    frames = traceback.extract_tb(tb)
    return [
        {
            "file": frame.filename,
            "function": frame.name,
            "line": frame.lineno,
        }
        for frame in reversed(frames)
    ]


def serialize_error(error: Any) -> SerializedValue:
    """
    Describe an exception for the log record.

    Non-exception values are described by their type name and ``str()``
    with an empty backtrace.
    """
    backtrace = _backtrace(error) if isinstance(error, BaseException) else []
    return SerializedValue(
        path="event.error",
        value={
            "name": type(error).__name__,
            "message": str(error),
            "backtrace": backtrace,
        },
    )
