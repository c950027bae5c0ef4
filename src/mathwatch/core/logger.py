"""Scoped, leveled logger writing to a single append-only sink."""

import logging
import threading
from types import TracebackType

from mathwatch.core import logs
from mathwatch.core.models import LogEntry, LogLevel
from mathwatch.core.ports import LogSinkPort

_log = logging.getLogger(__name__)

STARTUP_MESSAGE = "System started"
SHUTDOWN_MESSAGE = "System stopped"


class Logger:
    """Single authoritative writer to one log sink for its lifetime.

    Building a Logger writes a startup entry. Closing it, directly or by
    leaving a ``with`` block, writes a shutdown entry and releases the sink.

    Example:
        ```python
        with Logger(AppendOnlyLogFile("system.log")) as logger:
            logger.info("Attempting to divide 100 / 5")
        ```
    """

    def __init__(self, sink: LogSinkPort) -> None:
        self._sink = sink
        self._lock = threading.RLock()
        self._closed = False
        try:
            self.log(LogLevel.INFO, STARTUP_MESSAGE)
        except BaseException:
            self._closed = True
            sink.close()
            raise

    @property
    def sink(self) -> LogSinkPort:
        return self._sink

    @property
    def closed(self) -> bool:
        return self._closed

    def log(self, level: LogLevel | str, message: str) -> LogEntry:
        """Write one entry and return it once it is durable.

        Raises:
            ValueError: If the logger has been closed.
        """
        with self._lock:
            if self._closed:
                raise ValueError("I/O operation on closed logger")
            entry = logs.log(level, message)
            self._sink.write(entry)
        return entry

    def debug(self, message: str) -> LogEntry:
        return self.log(LogLevel.DEBUG, message)

    def info(self, message: str) -> LogEntry:
        return self.log(LogLevel.INFO, message)

    def warning(self, message: str) -> LogEntry:
        return self.log(LogLevel.WARNING, message)

    def error(self, message: str) -> LogEntry:
        return self.log(LogLevel.ERROR, message)

    def critical(self, message: str) -> LogEntry:
        return self.log(LogLevel.CRITICAL, message)

    def log_exception(self, exc: BaseException) -> LogEntry:
        """Log a caught exception at ERROR."""
        return self.error(logs.exception_message(exc))

    def log_metrics(self, total: int, success: int, failure: int) -> LogEntry:
        """Log the counters and derived success rate at INFO."""
        return self.info(logs.metrics_message(total, success, failure))

    def close(self) -> None:
        """Write the shutdown entry and release the sink. Safe to call twice."""
        if self._closed:
            return
        try:
            self.log(LogLevel.INFO, SHUTDOWN_MESSAGE)
        finally:
            with self._lock:
                self._closed = True
                self._sink.close()
            _log.debug("Logger closed")

    def __enter__(self) -> "Logger":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()
