"""
Default serializer for user data objects.
"""

from typing import Any

from logality.serializers.base import SerializedValue, read_field


def serialize_user(udo: Any) -> SerializedValue:
    """Keep only the identifying fields of a user, from a dict or an object."""
    return SerializedValue(
        path="context.user",
        value={
            "id": read_field(udo, "id"),
            "email": read_field(udo, "email"),
        },
    )
