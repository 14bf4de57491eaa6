"""
Logality - Extensible JSON Logger

Logality writes one JSON object per log call, following a fixed schema:
Syslog severities, an ISO-8601 timestamp, the calling source file, host and
process metadata, and context slices produced by pluggable serializers for
well-known keys such as ``user``, ``error``, ``req`` and ``custom``.

Key Features:
    - Eight Syslog severity levels with per-level shorthands
    - Serializer registry with caller overrides and new keys
    - Compact newline-delimited JSON or rich pretty rendering
    - Synchronous or awaitable (asyncio) dispatch
    - Stream or callable sinks

Modules:
    core: Configuration, diagnostics logging, exceptions and severities
    serializers: Built-in serializers and the serializer registry
    record: Record skeleton assembly and host/caller metadata
    dispatch: Per-call dispatch engine
    output: Renderers and sink writing

Example:
    >>> from logality import Logality
    >>> log = Logality(app_name="api").get()
    >>> log.info("hello world")
    {"level":"info","severity":6,"dt":"...","message":"hello world",...}
"""

__version__ = "0.1.0"
__description__ = "Extensible JSON logger with pluggable context serializers"

from logality.core.exceptions.custom_exceptions import (
    ConfigurationError,
    InvalidLevelError,
    LogalityError,
    OutputError,
    SerializerError,
)
from logality.core.severity import LEVELS, Severity, rank_of
from logality.logger import BoundLogger, Logality
from logality.record.system import HostMetadata
from logality.serializers.base import SerializedValue

__all__ = [
    "Logality",
    "BoundLogger",
    "HostMetadata",
    "SerializedValue",
    "LEVELS",
    "Severity",
    "rank_of",
    "LogalityError",
    "ConfigurationError",
    "InvalidLevelError",
    "SerializerError",
    "OutputError",
]
