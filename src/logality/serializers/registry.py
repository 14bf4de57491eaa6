"""
Serializer registry: reserved context key -> serializer function.

The registry starts from the built-in serializers (``user``, ``error``,
``req``, ``custom``) and applies caller overrides on top. An override for an
existing key replaces the default outright; an override for a new key adds
it. Once construction finishes the registry is frozen and is only read
during dispatch, so one registry can serve concurrent calls.

Example:
    >>> registry = SerializerRegistry({"user": lambda u: {"id": u["uid"]}})
    >>> registry.lookup("user")({"uid": 7})
    {'id': 7}
    >>> registry.lookup("session") is None
    True
    >>> registry.register("session", str)
    Traceback (most recent call last):
    ...
    ConfigurationError: Serializer registry is frozen
"""

from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional

from logality.core.exceptions.custom_exceptions import ConfigurationError
from logality.serializers.base import Serializer
from logality.serializers.custom import serialize_custom
from logality.serializers.error import serialize_error
from logality.serializers.request import serialize_request
from logality.serializers.user import serialize_user

DEFAULT_SERIALIZERS: Mapping[str, Serializer] = MappingProxyType(
    {
        "user": serialize_user,
        "error": serialize_error,
        "req": serialize_request,
        "custom": serialize_custom,
    }
)


class SerializerRegistry:
    """Built-in serializers merged with caller overrides, read-only once built."""

    def __init__(self, overrides: Optional[Mapping[str, Serializer]] = None):
        self._serializers: Dict[str, Serializer] = {}
        self._frozen = False

        for key, serializer in DEFAULT_SERIALIZERS.items():
            self.register(key, serializer)
        for key, serializer in (overrides or {}).items():
            self.register(key, serializer)

        self._frozen = True

    def register(self, key: str, serializer: Serializer) -> None:
        """
        Add or replace the serializer for ``key``.

        Raises:
            ConfigurationError: If called after construction, or if the
                serializer is not callable
        """
        if self._frozen:
            raise ConfigurationError(
                "Serializer registry is frozen",
                error_code="REGISTRY_FROZEN",
                details={"key": key},
            )
        if not callable(serializer):
            raise ConfigurationError(
                f"Serializer for '{key}' is not callable",
                error_code="INVALID_SERIALIZER",
                details={"key": key},
            )
        self._serializers[key] = serializer

    def lookup(self, key: str) -> Optional[Serializer]:
        return self._serializers.get(key)

    def keys(self):
        return self._serializers.keys()

    def __contains__(self, key: object) -> bool:
        return key in self._serializers

    def __iter__(self) -> Iterator[str]:
        return iter(self._serializers)

    def __len__(self) -> int:
        return len(self._serializers)
