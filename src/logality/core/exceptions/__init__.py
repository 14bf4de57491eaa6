"""
Logality exceptions.
"""

from .custom_exceptions import (
    ConfigurationError,
    InvalidLevelError,
    LogalityError,
    OutputError,
    SerializerError,
)

__all__ = [
    "LogalityError",
    "ConfigurationError",
    "InvalidLevelError",
    "SerializerError",
    "OutputError",
]
