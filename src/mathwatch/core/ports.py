"""Port interfaces for log sinks.

The Logger depends only on this protocol, not on a concrete destination.
"""

from typing import Protocol, runtime_checkable

from mathwatch.core.models import LogEntry


@runtime_checkable
class LogSinkPort(Protocol):
    """Port for append-only log destinations.

    Adapters implementing this protocol persist log entries in call order.
    Examples: AppendOnlyLogFile, InMemoryLogSink.
    """

    def write(self, entry: LogEntry) -> None:
        """Append a log entry.

        The entry must be readable from the destination once this returns.
        """
        ...

    def close(self) -> None:
        """Release the destination. Further writes raise ValueError."""
        ...
