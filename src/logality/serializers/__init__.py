"""
Context serializers.

Each reserved context key is turned into a slice of the log record by one
serializer function. The defaults cover users, exceptions, HTTP requests and
free-form custom payloads; callers may replace any of them or register new
keys when constructing a Logality instance.
"""

from .base import DEFAULT_PATHS, SerializedValue, Serializer, normalize_result
from .custom import serialize_custom
from .error import serialize_error
from .registry import DEFAULT_SERIALIZERS, SerializerRegistry
from .request import serialize_request
from .user import serialize_user

__all__ = [
    "DEFAULT_PATHS",
    "DEFAULT_SERIALIZERS",
    "SerializedValue",
    "Serializer",
    "SerializerRegistry",
    "normalize_result",
    "serialize_custom",
    "serialize_error",
    "serialize_request",
    "serialize_user",
]
