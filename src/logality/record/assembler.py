"""
Log record assembly.

Builds the fixed-shape record skeleton for one call and merges serializer
output into it at record paths. Records are plain nested dicts, built fresh
for every call and never shared between calls.

Record Shape:
    {
        "level": "info",
        "severity": 6,
        "dt": "2026-01-01T10:00:00.000Z",
        "message": "hello world",
        "context": {
            "runtime": {"application": "api", "file": "/app/server.py"},
            "source": {"file_name": "/app/server.py"},
            "system": {"hostname": "web-1", "pid": 4242, "process_name": "..."}
        },
        "event": {}
    }

Merging:
    merge_at() walks a dotted path ("context.user") or a segment sequence,
    creating intermediate objects as needed, and overwrites whatever sits at
    the final segment. A non-object found midway is replaced by an object.

Example:
    >>> assembler = RecordAssembler("api", HostMetadata("web-1", 4242, "python"))
    >>> record = assembler.new_skeleton("info", 6, "hi", "/app/server.py")
    >>> RecordAssembler.merge_at(record, "context.user", {"id": 1})
    >>> record["context"]["user"]
    {'id': 1}
"""

from datetime import datetime
from typing import Any, Dict, Optional

from logality.record.system import Clock, HostMetadata, format_timestamp, utc_now
from logality.serializers.base import Path, split_path

LogRecord = Dict[str, Any]


class RecordAssembler:
    """Builds record skeletons for one Logality instance."""

    def __init__(
        self,
        app_name: str,
        host_metadata: HostMetadata,
        clock: Optional[Clock] = None,
    ):
        self.app_name = app_name
        self.host_metadata = host_metadata
        self.clock = clock or utc_now

    def new_skeleton(
        self,
        level: str,
        rank: int,
        message: str,
        source_location: str,
        dt: Optional[datetime] = None,
    ) -> LogRecord:
        """
        Build the record skeleton with an empty ``event`` object.

        Args:
            level: Validated severity name
            rank: Numeric rank of the level
            message: Human-readable message
            source_location: File path of the logging call site
            dt: Timestamp override, defaults to the assembler clock

        Returns:
            LogRecord: A new record owned by the caller
        """
        return {
            "level": level,
            "severity": rank,
            "dt": format_timestamp(dt or self.clock()),
            "message": message,
            "context": {
                "runtime": {
                    "application": self.app_name,
                    "file": source_location,
                },
                "source": {
                    "file_name": source_location,
                },
                "system": self.host_metadata.to_dict(),
            },
            "event": {},
        }

    @staticmethod
    def merge_at(record: LogRecord, path: Path, value: Any) -> None:
        """
        Write ``value`` into ``record`` at ``path``, last writer wins.

        Raises:
            ValueError: If the path is empty or malformed
        """
        segments = split_path(path)
        node = record
        for segment in segments[:-1]:
            child = node.get(segment)
            if not isinstance(child, dict):
                child = {}
                node[segment] = child
            node = child
        node[segments[-1]] = value
