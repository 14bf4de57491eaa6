"""
Log record assembly and the metadata that feeds it.
"""

from .assembler import LogRecord, RecordAssembler
from .system import (
    HostMetadata,
    format_timestamp,
    resolve_caller_location,
    utc_now,
)

__all__ = [
    "LogRecord",
    "RecordAssembler",
    "HostMetadata",
    "format_timestamp",
    "resolve_caller_location",
    "utc_now",
]
