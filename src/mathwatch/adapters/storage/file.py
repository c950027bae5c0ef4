"""Append-only text file sink for log entries."""

import logging
import os
import threading
from typing import TextIO

from mathwatch.core.encoding.text import encode_entry
from mathwatch.core.errors import LogOpenError
from mathwatch.core.models import LogEntry

_log = logging.getLogger(__name__)


class AppendOnlyLogFile:
    """File implementation of LogSinkPort.

    Opens the destination in append mode on construction and keeps the
    handle until close(). Every write is flushed and fsynced before it
    returns, so a crash loses nothing already logged.

    Args:
        path: Destination file. Created if missing, never truncated.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = os.fspath(path)
        self._lock = threading.Lock()
        try:
            self._file: TextIO = open(self._path, "a", encoding="utf-8")
        except OSError as exc:
            raise LogOpenError(self._path) from exc
        _log.debug("Opened log file %s", self._path)

    @property
    def path(self) -> str:
        return self._path

    @property
    def closed(self) -> bool:
        return self._file.closed

    def write(self, entry: LogEntry) -> None:
        """Append one encoded line and make it durable."""
        line = encode_entry(entry) + "\n"
        with self._lock:
            self._file.write(line)
            self._file.flush()
            os.fsync(self._file.fileno())

    def read_lines(self) -> list[str]:
        """Return every line currently in the file, without newlines."""
        with open(self._path, encoding="utf-8") as f:
            return f.read().splitlines()

    def close(self) -> None:
        """Close the handle. Safe to call more than once."""
        with self._lock:
            if self._file.closed:
                return
            self._file.close()
        _log.debug("Closed log file %s", self._path)
