"""
Pytest configuration and fixtures for Logality tests
"""

import json
from datetime import datetime, timezone
from typing import Any, Dict, List

import pytest

from logality import Logality
from logality.record.system import HostMetadata

SOURCE_FILE = "/tests/unit/test_module.py"
FIXED_DT = datetime(2026, 1, 1, 10, 0, 0, tzinfo=timezone.utc)


class CollectingSink:
    """Writable stream that keeps every chunk written to it"""

    def __init__(self):
        self.chunks: List[str] = []

    def write(self, chunk: str) -> None:
        self.chunks.append(chunk)

    @property
    def records(self) -> List[Dict[str, Any]]:
        return [json.loads(chunk) for chunk in self.chunks]


@pytest.fixture
def sink() -> CollectingSink:
    return CollectingSink()


@pytest.fixture
def host_metadata() -> HostMetadata:
    return HostMetadata(hostname="test-host", pid=4242, process_name="/usr/bin/python3")


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_DT


@pytest.fixture
def make_logality(sink, host_metadata, fixed_clock):
    """Factory for Logality instances with deterministic metadata"""

    def _make(**kwargs) -> Logality:
        options = {
            "app_name": "testLogality",
            "wstream": sink,
            "host_metadata": host_metadata,
            "clock": fixed_clock,
            "caller_resolver": lambda: SOURCE_FILE,
        }
        options.update(kwargs)
        return Logality(**options)

    return _make
