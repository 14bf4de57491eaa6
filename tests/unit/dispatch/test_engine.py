"""
Tests for the dispatch engine
"""

from unittest.mock import MagicMock

import pytest

from logality.core.exceptions.custom_exceptions import InvalidLevelError
from logality.core.states import CallState
from logality.dispatch.engine import DispatchEngine
from logality.output.renderers import CompactRenderer
from logality.output.writer import OutputStage
from logality.record.assembler import RecordAssembler
from logality.serializers.registry import SerializerRegistry


@pytest.fixture
def engine(host_metadata, fixed_clock, sink):
    return DispatchEngine(
        registry=SerializerRegistry(),
        assembler=RecordAssembler("engine", host_metadata, clock=fixed_clock),
        output=OutputStage(CompactRenderer(), wstream=sink),
    )


def test_build_record_does_not_write(engine, sink):
    record = engine.build_record("/a.py", "error", "built", {"custom": {"x": 1}})

    assert record["severity"] == 3
    assert record["context"]["custom"] == {"x": 1}
    assert sink.chunks == []


def test_dispatch_writes_one_line(engine, sink):
    engine.dispatch("/a.py", "info", "written")
    assert len(sink.chunks) == 1


def test_serializers_only_run_for_present_keys(host_metadata, sink):
    user_serializer = MagicMock(return_value={"id": 1})
    engine = DispatchEngine(
        registry=SerializerRegistry({"user": user_serializer}),
        assembler=RecordAssembler("engine", host_metadata),
        output=OutputStage(CompactRenderer(), wstream=sink),
    )

    engine.dispatch("/a.py", "info", "no user")
    user_serializer.assert_not_called()

    engine.dispatch("/a.py", "info", "with user", {"user": {"uid": 1}})
    user_serializer.assert_called_once_with({"uid": 1})


def test_invalid_level_state(engine):
    with pytest.raises(InvalidLevelError) as exc_info:
        engine.build_record("/a.py", "loud", "msg")
    assert exc_info.value.details["state"] == CallState.VALIDATING.value


def test_call_states_cover_the_pipeline():
    assert [state.value for state in CallState] == [
        "validating",
        "assembling",
        "serializing",
        "writing",
        "done",
        "failed",
    ]
