"""Program driver: scripted checks, one batch run, final metrics."""

import logging
import sys

from mathwatch.adapters.logging import attach_handler, detach_handler
from mathwatch.adapters.storage.file import AppendOnlyLogFile
from mathwatch.config import RunConfig
from mathwatch.console import Console
from mathwatch.core.errors import LogOpenError
from mathwatch.core.logger import Logger
from mathwatch.core.metrics import MetricsCounter
from mathwatch.runner import BatchRunner

_log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_LOG_OPEN_FAILED = 1


def _open_logger(path: str) -> Logger:
    """Open the log file and write the startup entry.

    A destination that opens but rejects the first write is reported the
    same way as one that cannot be opened at all.
    """
    sink = AppendOnlyLogFile(path)
    try:
        return Logger(sink)
    except OSError as exc:
        raise LogOpenError(path) from exc


def main(config: RunConfig | None = None, console: Console | None = None) -> int:
    """Run the demonstration and return the process exit code.

    Args:
        config: Run settings. Defaults reproduce the stock demo.
        console: Output streams. Defaults to stdout/stderr.

    Returns:
        0 on completion, 1 if the log file could not be opened.
    """
    config = config or RunConfig()
    console = console or Console()

    try:
        logger = _open_logger(config.log_path)
    except LogOpenError as exc:
        console.print_error(f"Critical system error: {exc}")
        return EXIT_LOG_OPEN_FAILED

    with logger:
        handler = attach_handler(logger, level=config.handler_level)
        try:
            counter = MetricsCounter(logger, console)
            runner = BatchRunner(
                logger, counter, console, delay=config.pacing_delay
            )

            console.banner("MONITORING AND LOGGING SYSTEM")
            for title, a, b in config.checks:
                runner.check(title, a, b)

            runner.run(config.batch)
            counter.show_metrics()

            console.print()
            console.success(f"Check '{config.log_path}' for the full records.")
            console.print()
            console.banner("RUN COMPLETED")
        finally:
            detach_handler(handler)

    _log.debug("Run finished")
    return EXIT_OK


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
