"""
Tests for caller location resolution
"""

import os

from logality import Logality
from logality.record.system import resolve_caller_location

THIS_FILE = os.path.abspath(__file__)


def test_resolves_this_module_outside_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert resolve_caller_location() == THIS_FILE


def test_resolves_relative_to_cwd(monkeypatch):
    monkeypatch.chdir(os.path.dirname(THIS_FILE))
    assert resolve_caller_location() == os.sep + os.path.basename(THIS_FILE)


def test_get_binds_calling_module(sink, host_metadata):
    log = Logality(wstream=sink, host_metadata=host_metadata).get()

    assert log.file_name.endswith("test_system.py")
    log.info("located")
    source = sink.records[0]["context"]["source"]["file_name"]
    assert source == log.file_name
    assert sink.records[0]["context"]["runtime"]["file"] == log.file_name


def test_custom_resolver_called_once_per_get(sink):
    calls = []

    def resolver():
        calls.append(1)
        return "/fixed/location.py"

    logality = Logality(wstream=sink, caller_resolver=resolver)
    log = logality.get()
    log.info("one")
    log.info("two")

    assert len(calls) == 1
    assert all(
        record["context"]["source"]["file_name"] == "/fixed/location.py"
        for record in sink.records
    )
