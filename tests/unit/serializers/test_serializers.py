"""
Tests for the built-in serializers and the serializer result contract
"""

import json
from types import SimpleNamespace

import pytest

from logality.serializers.base import (
    SerializedValue,
    default_path,
    normalize_result,
    read_field,
    split_path,
)
from logality.serializers.custom import serialize_custom
from logality.serializers.error import serialize_error
from logality.serializers.request import serialize_request
from logality.serializers.user import serialize_user


class TestUserSerializer:
    """Test the default user serializer"""

    def test_user_from_mapping(self):
        result = serialize_user({"id": 10, "email": "one@go.com", "password": "x"})
        assert result.path == "context.user"
        assert result.value == {"id": 10, "email": "one@go.com"}

    def test_user_from_object(self):
        udo = SimpleNamespace(id=11, email="eleven@go.com", name="Eleven")
        assert serialize_user(udo).value == {"id": 11, "email": "eleven@go.com"}

    def test_user_missing_fields(self):
        assert serialize_user({}).value == {"id": None, "email": None}


class TestErrorSerializer:
    """Test the default error serializer"""

    def test_raised_error_has_backtrace(self):
        def explode():
            raise ValueError("boom")

        try:
            explode()
        except ValueError as e:
            result = serialize_error(e)

        assert result.path == "event.error"
        assert result.value["name"] == "ValueError"
        assert result.value["message"] == "boom"

        backtrace = result.value["backtrace"]
        assert len(backtrace) == 2
        # Innermost frame first
        assert backtrace[0]["function"] == "explode"
        assert backtrace[0]["file"].endswith("test_serializers.py")
        assert isinstance(backtrace[0]["line"], int)
        assert set(backtrace[0].keys()) == {"file", "function", "line"}

    def test_unraised_error_has_empty_backtrace(self):
        result = serialize_error(KeyError("missing"))
        assert result.value["name"] == "KeyError"
        assert result.value["backtrace"] == []

    def test_non_exception_value(self):
        result = serialize_error("plain string failure")
        assert result.value == {
            "name": "str",
            "message": "plain string failure",
            "backtrace": [],
        }


class TestRequestSerializer:
    """Test the default request serializer"""

    def test_request_from_mapping(self):
        req = {
            "headers": {"user-agent": "pytest"},
            "hostname": "api.example.com",
            "method": "POST",
            "path": "/orders",
            "query": {"page": "2"},
            "secure": True,
        }
        result = serialize_request(req)

        assert result.path == "event.http_request"
        assert result.value == {
            "headers": {"user-agent": "pytest"},
            "host": "api.example.com",
            "method": "POST",
            "path": "/orders",
            "query_string": '{"page": "2"}',
            "scheme": "https",
        }

    def test_request_starlette_shape(self):
        req = SimpleNamespace(
            headers={"accept": "application/json"},
            method="GET",
            url=SimpleNamespace(hostname="svc.local", path="/health", scheme="https"),
            query_params={"verbose": "1"},
        )
        value = serialize_request(req).value

        assert value["host"] == "svc.local"
        assert value["path"] == "/health"
        assert value["scheme"] == "https"
        assert json.loads(value["query_string"]) == {"verbose": "1"}

    def test_request_werkzeug_shape(self):
        req = SimpleNamespace(
            headers={"host": "localhost:5000"},
            host="localhost:5000",
            method="DELETE",
            path="/items/3",
            url="http://localhost:5000/items/3",
            args={},
            scheme="http",
        )
        value = serialize_request(req).value

        assert value["host"] == "localhost:5000"
        assert value["path"] == "/items/3"
        assert value["query_string"] == "{}"
        assert value["scheme"] == "http"

    def test_request_missing_fields(self):
        value = serialize_request({}).value
        assert value == {
            "headers": {},
            "host": None,
            "method": None,
            "path": None,
            "query_string": "{}",
            "scheme": "http",
        }

    def test_request_with_unusable_headers(self):
        value = serialize_request({"headers": 42, "method": "GET"}).value
        assert value["headers"] == {}
        assert value["method"] == "GET"


def test_custom_serializer_is_identity():
    payload = {"a": 1, "b": [1, 2]}
    result = serialize_custom(payload)
    assert result.path == "context.custom"
    assert result.value is payload


class TestResultContract:
    """Test serializer result normalization"""

    def test_serialized_value_passes_through(self):
        result = SerializedValue("event.audit", {"ok": True})
        assert normalize_result("audit", result) is result

    def test_path_value_mapping(self):
        result = normalize_result(
            "user", {"path": "context.user", "value": {"id": 12}}
        )
        assert result == SerializedValue("context.user", {"id": 12})

    def test_plain_value_uses_default_path(self):
        assert normalize_result("user", {"id": 1}).path == "context.user"
        assert normalize_result("req", {}).path == "event.http_request"
        assert normalize_result("session", "abc") == SerializedValue(
            "context.session", "abc"
        )

    def test_mapping_with_extra_keys_is_a_plain_value(self):
        value = {"path": "/orders", "value": 3, "method": "GET"}
        result = normalize_result("custom", value)
        assert result.path == "context.custom"
        assert result.value == value

    def test_default_paths(self):
        assert default_path("error") == "event.error"
        assert default_path("custom") == "context.custom"
        assert default_path("tenant") == "context.tenant"

    def test_split_path(self):
        assert split_path("context.user") == ("context", "user")
        assert split_path(["event", "http_request"]) == ("event", "http_request")

    @pytest.mark.parametrize("path", ["", "context..user", [], ["context", ""]])
    def test_split_path_rejects_empty_segments(self, path):
        with pytest.raises(ValueError):
            split_path(path)


def test_read_field_prefers_attributes_on_mapping_objects():
    class ScopeRequest(dict):
        pass

    class FrameworkRequest:
        method = "PUT"

        def __init__(self):
            self._scope = {"method": "ignored", "path": "/scoped"}

        def __getitem__(self, key):
            return self._scope[key]

    # Plain dict subclasses read keys
    assert read_field(ScopeRequest(method="GET"), "method") == "GET"
    assert read_field(FrameworkRequest(), "method") == "PUT"
    assert read_field(None, "method", "fallback") == "fallback"
