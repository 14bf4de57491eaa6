"""
Syslog severity table.

Eight levels ordered from most to least severe. A level's rank is its
position in ``LEVELS`` and equals its Syslog numeric severity.
"""

from enum import IntEnum
from typing import Tuple


class Severity(IntEnum):
    EMERGENCY = 0
    ALERT = 1
    CRITICAL = 2
    ERROR = 3
    WARN = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7

    @property
    def level_name(self) -> str:
        """Lower-case level name as written to records"""
        return self.name.lower()


# Sequence matters, index == rank
LEVELS: Tuple[str, ...] = tuple(severity.level_name for severity in Severity)

NOT_FOUND = -1


def rank_of(level: str) -> int:
    """
    Return the numeric rank of a level name, or ``NOT_FOUND``.

    Matching is exact: ``"INFO"`` and ``"warning"`` are not level names.
    """
    try:
        return LEVELS.index(level)
    except ValueError:
        return NOT_FOUND
