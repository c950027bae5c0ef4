"""Log sink adapters."""

from mathwatch.adapters.storage.file import AppendOnlyLogFile
from mathwatch.adapters.storage.in_memory import InMemoryLogSink

__all__ = [
    "AppendOnlyLogFile",
    "InMemoryLogSink",
]
