"""In-memory log sink."""

from mathwatch.core.models import LogEntry


class InMemoryLogSink:
    """In-memory implementation of LogSinkPort.

    Stores log entries in a list. Suitable for testing and for embedding
    the runner where persistence is not required.
    """

    def __init__(self) -> None:
        self._entries: list[LogEntry] = []
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def write(self, entry: LogEntry) -> None:
        """Append a log entry."""
        if self._closed:
            raise ValueError("I/O operation on closed sink")
        self._entries.append(entry)

    def read(self) -> list[LogEntry]:
        """Return entries in write order."""
        return list(self._entries)

    def messages(self) -> list[str]:
        """Return just the messages, in write order."""
        return [entry.message for entry in self._entries]

    def close(self) -> None:
        self._closed = True
