"""Python logging handler adapter for mathwatch.

This adapter bridges Python's standard library logging module to a
mathwatch Logger, so diagnostics from the package land in the same
append-only log file as the operation records.
"""

import logging
import traceback

from mathwatch.core.encoding.text import flatten
from mathwatch.core.logger import Logger
from mathwatch.core.models import LogLevel

PACKAGE_LOGGER_NAME = "mathwatch"


def level_for_record(levelno: int) -> LogLevel:
    """Map a stdlib logging level number onto the closest LogLevel."""
    if levelno >= logging.CRITICAL:
        return LogLevel.CRITICAL
    if levelno >= logging.ERROR:
        return LogLevel.ERROR
    if levelno >= logging.WARNING:
        return LogLevel.WARNING
    if levelno >= logging.INFO:
        return LogLevel.INFO
    return LogLevel.DEBUG


class MathwatchHandler(logging.Handler):
    """Logging handler that writes log records through a mathwatch Logger.

    Records arriving after the Logger has been closed are dropped.

    Example:
        ```python
        handler = MathwatchHandler(logger, level=logging.WARNING)
        logging.getLogger("mathwatch").addHandler(handler)
        ```
    """

    def __init__(self, logger: Logger, level: int = logging.NOTSET) -> None:
        """Initialize the handler with a target Logger.

        Args:
            logger: Logger that receives the formatted records.
            level: Minimum stdlib level to forward.
        """
        super().__init__(level)
        self._logger = logger

    def emit(self, record: logging.LogRecord) -> None:
        """Emit a log record through the Logger.

        Args:
            record: The log record to emit.
        """
        if self._logger.closed:
            return
        try:
            message = f"{record.name}: {record.getMessage()}"
            # Append exception details when the record carries them
            if record.exc_info:
                exc_type, exc_value, exc_tb = record.exc_info
                if exc_type is not None:
                    formatted = "".join(
                        traceback.format_exception(exc_type, exc_value, exc_tb)
                    )
                    message = f"{message} | {flatten(formatted)}"
            self._logger.log(level_for_record(record.levelno), message)
        except Exception:
            self.handleError(record)


def attach_handler(logger: Logger, level: int = logging.WARNING) -> MathwatchHandler:
    """Attach a MathwatchHandler to the package logger and return it."""
    handler = MathwatchHandler(logger, level=level)
    logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(handler)
    return handler


def detach_handler(handler: MathwatchHandler) -> None:
    """Remove a handler previously installed by attach_handler."""
    logging.getLogger(PACKAGE_LOGGER_NAME).removeHandler(handler)
