"""
Logality configuration: environment defaults and construction options.
"""

from .settings import Settings, get_settings
from .validation import LoggerOptions

__all__ = ["Settings", "get_settings", "LoggerOptions"]
