"""
States of a single log call, recorded in error details.
"""

from enum import Enum


class CallState(str, Enum):
    VALIDATING = "validating"
    ASSEMBLING = "assembling"
    SERIALIZING = "serializing"
    WRITING = "writing"
    DONE = "done"
    FAILED = "failed"
