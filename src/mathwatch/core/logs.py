"""Log helper functions for creating LogEntry objects and standard messages."""

import time

from mathwatch.core.models import LogEntry, LogLevel, MetricsSnapshot

EXCEPTION_PREFIX = "Exception caught: "
UNEXPECTED_PREFIX = "Unexpected exception caught: "


def log(level: LogLevel | str, message: str) -> LogEntry:
    """Create a log entry with automatic timestamp.

    Args:
        level: Log level, either a LogLevel or its name (e.g. "INFO")
        message: The log message

    Returns:
        LogEntry with current timestamp
    """
    return LogEntry(
        timestamp=time.time(),
        level=LogLevel(level),
        message=message,
    )


def exception_message(exc: BaseException) -> str:
    """Message logged for a caught domain error."""
    return f"{EXCEPTION_PREFIX}{exc}"


def unexpected_message(exc: BaseException) -> str:
    """Message logged for an error outside the domain taxonomy."""
    return f"{UNEXPECTED_PREFIX}{exc}"


def format_rate(rate: float) -> str:
    """Format a percentage with %g semantics (50, 62.5, 0)."""
    return f"{rate:g}"


def metrics_message(total: int, success: int, failure: int) -> str:
    """Build the one-line metrics summary.

    Args:
        total: Number of recorded attempts
        success: Successful attempts
        failure: Failed attempts

    Returns:
        ``Metrics - Total: T | Successful: S | Failed: F | Success rate: R%``
    """
    rate = MetricsSnapshot(total=total, success=success, failure=failure).success_rate
    return (
        f"Metrics - Total: {total}"
        f" | Successful: {success}"
        f" | Failed: {failure}"
        f" | Success rate: {format_rate(rate)}%"
    )
