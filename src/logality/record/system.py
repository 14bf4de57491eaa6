"""
Process, host and call-site metadata for log records.

These are the collaborators the record assembler consumes: host metadata is
gathered once per Logality instance, the caller location once per bound
logger, and the timestamp once per call. Each can be replaced with a fixed
value for tests.
"""

import os
import socket
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from types import FrameType
from typing import Callable, Optional

CallerResolver = Callable[[], str]
Clock = Callable[[], datetime]

_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


@dataclass(frozen=True)
class HostMetadata:
    """Values written to context.system on every record."""

    hostname: str
    pid: int
    process_name: str

    @classmethod
    def collect(cls) -> "HostMetadata":
        return cls(
            hostname=socket.gethostname(),
            pid=os.getpid(),
            process_name=sys.executable or (sys.argv[0] if sys.argv else ""),
        )

    def to_dict(self) -> dict:
        return {
            "hostname": self.hostname,
            "pid": self.pid,
            "process_name": self.process_name,
        }


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(dt: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision, e.g. 2026-01-01T10:00:00.000Z"""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _is_internal(filename: str) -> bool:
    path = os.path.abspath(filename)
    return path == _PACKAGE_DIR or path.startswith(_PACKAGE_DIR + os.sep)


def _relative_to_cwd(path: str) -> str:
    cwd = os.getcwd()
    if path.startswith(cwd + os.sep):
        # Keep the leading separator: "/app/server.py"
        return path[len(cwd):]
    return path


def resolve_caller_location(frame: Optional[FrameType] = None) -> str:
    """
    Return the file path of the first stack frame outside the logality package.

    Frames are matched by file location rather than stack depth, so wrappers
    inside the package never shift the result.
    """
    frame = frame or sys._getframe(1)
    while frame is not None:
        filename = frame.f_code.co_filename
        if not _is_internal(filename):
            return _relative_to_cwd(os.path.abspath(filename))
        frame = frame.f_back
    return ""
