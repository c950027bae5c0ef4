"""Run configuration for the demonstration driver."""

import logging
from dataclasses import dataclass

DEFAULT_LOG_PATH = "system.log"
DEFAULT_PACING_DELAY = 0.5

# (dividend, divisor) pairs processed by the batch run
DEFAULT_BATCH: tuple[tuple[float, float], ...] = (
    (100, 5),
    (50, 0),
    (81, 9),
    (-10, 2),
    (200, 10),
    (7, 0),
    (144, 12),
    (-50, -5),
)

# (title, dividend, divisor) single-call checks run before the batch
DEFAULT_CHECKS: tuple[tuple[str, float, float], ...] = (
    ("CHECK 1: Division by zero", 10, 0),
    ("CHECK 2: Negative numbers", -5, 2),
    ("CHECK 3: Valid division", 100, 5),
)


@dataclass(frozen=True)
class RunConfig:
    """Settings for one program run.

    Attributes:
        log_path: Append-only log file destination.
        pacing_delay: Seconds to pause between batch entries (0 disables).
        checks: Scripted single-call checks, in order.
        batch: Operand pairs for the batch run, in order.
        handler_level: Minimum stdlib logging level forwarded to the log file.
    """

    log_path: str = DEFAULT_LOG_PATH
    pacing_delay: float = DEFAULT_PACING_DELAY
    checks: tuple[tuple[str, float, float], ...] = DEFAULT_CHECKS
    batch: tuple[tuple[float, float], ...] = DEFAULT_BATCH
    handler_level: int = logging.WARNING
