"""Shared test fixtures for all test modules."""

import io
from collections.abc import Iterator
from pathlib import Path

import pytest

from mathwatch.adapters.storage.in_memory import InMemoryLogSink
from mathwatch.console import Console
from mathwatch.core.logger import Logger
from mathwatch.core.metrics import MetricsCounter


@pytest.fixture
def log_path(tmp_path: Path) -> str:
    """Provide a temporary log file path."""
    return str(tmp_path / "system.log")


@pytest.fixture
def console() -> Console:
    """Console writing to in-memory streams.

    Read back with ``console.out.getvalue()`` / ``console.err.getvalue()``.
    """
    return Console(out=io.StringIO(), err=io.StringIO())


@pytest.fixture
def sink() -> InMemoryLogSink:
    """Fixture providing an empty in-memory log sink."""
    return InMemoryLogSink()


@pytest.fixture
def logger(sink: InMemoryLogSink) -> Iterator[Logger]:
    """Logger over the in-memory sink, closed after the test."""
    with Logger(sink) as logger:
        yield logger


@pytest.fixture
def counter(logger: Logger, console: Console) -> MetricsCounter:
    """Fresh metrics counter bound to the test logger and console."""
    return MetricsCounter(logger, console)
