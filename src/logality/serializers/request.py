"""
Default serializer for HTTP request objects.

The serializer is framework-agnostic and reads fields by duck typing, so it
accepts Starlette/FastAPI requests, Werkzeug/Flask requests and plain
mappings alike. Every field is optional: anything the request does not carry
is written as ``null`` and the serializer never raises.

Field Resolution:
    headers:      request.headers
    host:         request.hostname | request.host | request.url.hostname
    method:       request.method
    path:         request.path | request.url.path
    query_string: JSON of request.query | request.query_params | request.args
    scheme:       request.scheme | request.url.scheme | secure flag

Example:
    >>> serialize_request({"method": "GET", "path": "/health"}).value["scheme"]
    'http'
"""

import json
from typing import Any, Dict

from logality.serializers.base import SerializedValue, read_field


def _first_present(source: Any, *names: str) -> Any:
    for name in names:
        value = read_field(source, name)
        if value is not None:
            return value
    return None


def _headers(req: Any) -> Dict[str, Any]:
    headers = read_field(req, "headers")
    if headers is None:
        return {}
    try:
        return {str(key): value for key, value in dict(headers).items()}
    except (TypeError, ValueError):
        return {}


def _query_string(req: Any) -> str:
    query = _first_present(req, "query", "query_params", "args")
    if query is None:
        return "{}"
    if isinstance(query, (str, bytes)):
        # Already-encoded query strings are kept verbatim
        if isinstance(query, bytes):
            return query.decode("utf-8", "replace")
        return query
    try:
        return json.dumps(dict(query), default=str)
    except (TypeError, ValueError):
        return "{}"


def _scheme(req: Any, url: Any) -> str:
    scheme = _first_present(req, "scheme") or read_field(url, "scheme")
    if scheme:
        return str(scheme)

    secure = _first_present(req, "secure", "is_secure")
    return "https" if secure is True else "http"


def serialize_request(req: Any) -> SerializedValue:
    """Map an HTTP request onto the ``event.http_request`` shape."""
    url = read_field(req, "url")
    if isinstance(url, str):
        # Werkzeug exposes url as a plain string
        url = None

    return SerializedValue(
        path="event.http_request",
        value={
            "headers": _headers(req),
            "host": _first_present(req, "hostname", "host")
            or read_field(url, "hostname"),
            "method": read_field(req, "method"),
            "path": read_field(req, "path") or read_field(url, "path"),
            "query_string": _query_string(req),
            "scheme": _scheme(req, url),
        },
    )
