"""
Serializer contract shared by built-in and caller-supplied serializers.

A serializer is a plain function ``(value) -> result``. The result is either
a ``SerializedValue`` naming the record path it belongs at, a mapping with
exactly the keys ``path`` and ``value`` (the same thing, spelled as a dict),
or any other value, which is placed at the key's default path.

Default paths:
    user   -> context.user
    custom -> context.custom
    error  -> event.error
    req    -> event.http_request
    other  -> context.<key>

Example:
    >>> def user_serializer(udo):
    ...     return SerializedValue("context.user", {"id": udo["userId"]})
    >>>
    >>> # Equivalent, mapping form
    >>> def user_serializer(udo):
    ...     return {"path": "context.user", "value": {"id": udo["userId"]}}
    >>>
    >>> # Plain value, lands at context.user because the key is "user"
    >>> def user_serializer(udo):
    ...     return {"id": udo["userId"]}
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Sequence, Tuple, Union

Path = Union[str, Sequence[str]]
Serializer = Callable[[Any], Any]

_MISSING = object()

DEFAULT_PATHS: Dict[str, str] = {
    "user": "context.user",
    "custom": "context.custom",
    "error": "event.error",
    "req": "event.http_request",
}


@dataclass(frozen=True)
class SerializedValue:
    """A serializer's output and the record path it is merged at."""

    path: Path
    value: Any


def default_path(key: str) -> str:
    return DEFAULT_PATHS.get(key, f"context.{key}")


def split_path(path: Path) -> Tuple[str, ...]:
    """
    Normalize a dotted string or a sequence of segments into a tuple.

    Raises:
        ValueError: If the path is empty or has an empty segment
    """
    if isinstance(path, str):
        segments = tuple(path.split("."))
    else:
        segments = tuple(path)

    if not segments or any(
        not isinstance(segment, str) or not segment for segment in segments
    ):
        raise ValueError(f"Invalid record path: {path!r}")
    return segments


def normalize_result(key: str, result: Any) -> SerializedValue:
    """Resolve a serializer's raw return value into a ``SerializedValue``."""
    if isinstance(result, SerializedValue):
        return result
    if isinstance(result, Mapping) and set(result.keys()) == {"path", "value"}:
        return SerializedValue(path=result["path"], value=result["value"])
    return SerializedValue(path=default_path(key), value=result)


def read_field(source: Any, name: str, default: Any = None) -> Any:
    """
    Read ``name`` from an object attribute or a mapping key.

    Attributes win over keys for mapping-like framework objects (a Starlette
    request is also a mapping over its ASGI scope); plain dicts use keys only.

    Used by the built-in serializers to accept dicts and framework objects
    interchangeably. Never raises for a missing field.
    """
    if source is None:
        return default
    if isinstance(source, dict):
        return source.get(name, default)

    try:
        value = getattr(source, name, _MISSING)
    except Exception:
        # Properties on framework objects may raise outside a request cycle
        value = _MISSING
    if value is not _MISSING:
        return value
    if isinstance(source, Mapping):
        return source.get(name, default)
    return default
