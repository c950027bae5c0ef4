"""Batch runner routing division outcomes to the console, log and counters."""

import logging
import time
from collections.abc import Callable, Iterable

from mathwatch.console import Console
from mathwatch.core import logs
from mathwatch.core.errors import MathError
from mathwatch.core.logger import Logger
from mathwatch.core.metrics import MetricsCounter
from mathwatch.core.models import Attempt
from mathwatch.core.operations import divide

_log = logging.getLogger(__name__)

BATCH_HEADER = "===== REAL-TIME PROCESSING ====="


def _fmt(value: float) -> str:
    """Render an operand or result compactly (100, 2.5, -10)."""
    return f"{value:g}" if isinstance(value, (int, float)) else repr(value)


class BatchRunner:
    """Drives operand pairs through divide() one at a time.

    A failing entry is logged and counted, then the next entry runs. The
    batch is never aborted.

    Args:
        logger: Destination for operation records.
        counter: Metrics counter updated after every attempt.
        console: Streams for progress and failure lines.
        delay: Seconds to sleep after each batch entry. Zero skips sleeping.
        sleep: Sleep function, replaceable in tests.
    """

    def __init__(
        self,
        logger: Logger,
        counter: MetricsCounter,
        console: Console | None = None,
        delay: float = 0.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._logger = logger
        self._counter = counter
        self._console = console or Console()
        self._delay = delay
        self._sleep = sleep

    def _evaluate(self, a: float, b: float) -> Attempt:
        """Attempt one division and route the outcome."""
        try:
            result = divide(a, b)
        except MathError as exc:
            self._console.failure(str(exc))
            self._logger.log_exception(exc)
            attempt = Attempt(dividend=a, divisor=b, error=exc.kind)
        except Exception as exc:
            self._console.failure(f"Unexpected exception: {exc}")
            self._logger.error(logs.unexpected_message(exc))
            _log.debug("Unexpected failure dividing %r by %r", a, b, exc_info=exc)
            attempt = Attempt(dividend=a, divisor=b)
        else:
            self._console.success(f"Result: {_fmt(result)}")
            self._logger.info(f"Operation succeeded. Result: {_fmt(result)}")
            attempt = Attempt(dividend=a, divisor=b, result=result)

        self._counter.record(attempt)
        return attempt

    def check(self, title: str, a: float, b: float) -> Attempt:
        """Run one scripted single-call check under a section header."""
        self._console.section(title)
        self._logger.info(f"Attempting to divide {_fmt(a)} / {_fmt(b)}")
        return self._evaluate(a, b)

    def run(self, pairs: Iterable[tuple[float, float]]) -> list[Attempt]:
        """Process every pair in order and return the attempts.

        Args:
            pairs: (dividend, divisor) tuples.

        Returns:
            One Attempt per pair, in input order.
        """
        pairs = list(pairs)
        self._console.print()
        self._console.print(BATCH_HEADER)
        self._logger.info(f"Starting batch processing of {len(pairs)} operations")
        _log.debug("Batch of %d pairs, delay %.3fs", len(pairs), self._delay)

        attempts: list[Attempt] = []
        for index, (a, b) in enumerate(pairs, start=1):
            self._console.print()
            self._console.print(f"Operation #{index}: {_fmt(a)} / {_fmt(b)}")
            self._logger.debug(f"Processing operation: {_fmt(a)} / {_fmt(b)}")
            attempts.append(self._evaluate(a, b))
            if self._delay > 0:
                self._sleep(self._delay)

        self._logger.info("Batch processing completed")
        return attempts
