"""Core domain models for arithmetic monitoring data."""

from dataclasses import dataclass
from enum import Enum

from mathwatch.core.errors import ErrorKind


class LogLevel(str, Enum):
    """Severity tag attached to every log entry."""

    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
    DEBUG = "DEBUG"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class LogEntry:
    """A single line of the operations log.

    Attributes:
        timestamp: Unix timestamp in seconds.
        level: Severity level of the entry.
        message: Free-text message.
    """

    timestamp: float
    level: LogLevel
    message: str


@dataclass(frozen=True)
class Attempt:
    """One evaluated division.

    Attributes:
        dividend: Left operand.
        divisor: Right operand.
        result: Quotient when the division succeeded, otherwise None.
        error: Kind of domain failure, or None on success.
    """

    dividend: float
    divisor: float
    result: float | None = None
    error: ErrorKind | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None and self.result is not None


@dataclass(frozen=True)
class MetricsSnapshot:
    """Point-in-time copy of the operation counters.

    Attributes:
        total: Number of recorded attempts.
        success: Attempts that produced a result.
        failure: Attempts that failed for any reason.
    """

    total: int = 0
    success: int = 0
    failure: int = 0

    @property
    def success_rate(self) -> float:
        """Percentage of successful attempts, 0.0 when nothing was recorded."""
        if self.total == 0:
            return 0.0
        return self.success * 100.0 / self.total
