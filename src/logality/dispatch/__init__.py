"""
Dispatch engine for log calls.
"""

from .engine import DispatchEngine
from logality.core.states import CallState

__all__ = ["DispatchEngine", "CallState"]
