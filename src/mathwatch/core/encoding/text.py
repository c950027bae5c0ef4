"""Plain-text encoder for log entries."""

import time

from mathwatch.core.models import LogEntry

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
LINE_JOINER = " | "


def format_timestamp(timestamp: float) -> str:
    """Render a Unix timestamp in local time as YYYY-MM-DD HH:MM:SS."""
    return time.strftime(TIMESTAMP_FORMAT, time.localtime(timestamp))


def flatten(message: str) -> str:
    """Join the lines of a multi-line message with `` | ``."""
    lines = [line.strip() for line in message.splitlines()]
    return LINE_JOINER.join(line for line in lines if line)


def encode_entry(entry: LogEntry) -> str:
    """Encode a single log entry as one line, without the trailing newline.

    Messages spanning several lines are flattened so one entry never
    occupies more than one line of the file.

    Args:
        entry: The LogEntry to encode.

    Returns:
        ``[<timestamp>] [<LEVEL>] <message>``
    """
    stamp = format_timestamp(entry.timestamp)
    message = entry.message
    if "\n" in message or "\r" in message:
        message = flatten(message)
    return f"[{stamp}] [{entry.level.value}] {message}"
