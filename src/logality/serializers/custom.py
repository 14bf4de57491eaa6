"""
Default serializer for caller-defined payloads.
"""

from typing import Any

from logality.serializers.base import SerializedValue


def serialize_custom(payload: Any) -> SerializedValue:
    return SerializedValue(path="context.custom", value=payload)
