"""mathwatch - validated division with an append-only operations log.

Public API:
    divide, square_root, attempt_division: arithmetic operations
    ErrorKind, MathError, LogOpenError: error taxonomy
    Logger, MetricsCounter, BatchRunner: logging and monitoring pipeline
    AppendOnlyLogFile, InMemoryLogSink: log sinks
"""

from mathwatch.adapters.storage.file import AppendOnlyLogFile
from mathwatch.adapters.storage.in_memory import InMemoryLogSink
from mathwatch.config import RunConfig
from mathwatch.console import Console
from mathwatch.core.errors import ErrorKind, LogOpenError, MathError
from mathwatch.core.logger import Logger
from mathwatch.core.metrics import MetricsCounter
from mathwatch.core.models import Attempt, LogEntry, LogLevel, MetricsSnapshot
from mathwatch.core.operations import attempt_division, divide, square_root
from mathwatch.runner import BatchRunner

__all__ = [
    "AppendOnlyLogFile",
    "Attempt",
    "BatchRunner",
    "Console",
    "ErrorKind",
    "InMemoryLogSink",
    "LogEntry",
    "LogLevel",
    "LogOpenError",
    "Logger",
    "MathError",
    "MetricsCounter",
    "MetricsSnapshot",
    "RunConfig",
    "attempt_division",
    "divide",
    "square_root",
]

__version__ = "0.1.0"
