"""Error taxonomy for arithmetic operations and log initialisation.

Domain failures are a single exception type tagged with an ``ErrorKind``.
Call sites branch on ``err.kind`` rather than on exception subclasses.
"""

from enum import Enum


class ErrorKind(Enum):
    """Closed set of domain failures, each with its display message."""

    DIVISION_BY_ZERO = "Error: Division by zero detected."
    NEGATIVE_OPERAND = "Error: Negative number not allowed in this operation."
    INVALID_INPUT = "Error: Non-numeric input detected."

    @property
    def message(self) -> str:
        return self.value


class MathError(Exception):
    """Raised by arithmetic operations for invalid operands.

    Attributes:
        kind: Which domain failure occurred.
    """

    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(kind.message)
        self.kind = kind

    def __repr__(self) -> str:
        return f"MathError({self.kind.name})"


class LogOpenError(Exception):
    """Raised when the log destination cannot be opened for appending.

    Attributes:
        path: The destination that failed to open.
    """

    def __init__(self, path: str) -> None:
        super().__init__(f"Could not open log file: {path}")
        self.path = path
