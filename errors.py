# errors.py

from enum import Enum


class ErrorKind(Enum):
    """Recoverable decode conditions, reported as values rather than raised."""
    UNMATCHED_SYMBOL = "unmatched symbol"
    INCOMPLETE_QCODE = "incomplete Q-code"
    NOT_Q_PREFIXED = "not Q-prefixed"
    OVERSIZED_BUFFER = "oversized spaceless buffer"


class TableCollisionError(ValueError):
    """Two table entries end on the same tree path."""

    def __init__(self, code, first, second):
        super().__init__(f"code {code!r} is claimed by both {first!r} and {second!r}")
        self.code = code
        self.first = first
        self.second = second
