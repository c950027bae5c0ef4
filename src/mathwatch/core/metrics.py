"""Process-local operation counters and their summary report."""

from mathwatch.console import Console
from mathwatch.core.logger import Logger
from mathwatch.core.models import Attempt, MetricsSnapshot

REPORT_TITLE = " SYSTEM METRICS "
REPORT_WIDTH = 42


def render_report(snapshot: MetricsSnapshot) -> str:
    """Render the console metrics report for a snapshot.

    The success rate line is omitted when nothing has been recorded.

    Args:
        snapshot: Counters to render.

    Returns:
        Multi-line report, without a trailing newline.
    """
    lines = [
        "",
        REPORT_TITLE.center(REPORT_WIDTH, "="),
        f"Total operations: {snapshot.total}",
        f"Successful operations: {snapshot.success}",
        f"Failed operations: {snapshot.failure}",
    ]
    if snapshot.total > 0:
        lines.append(f"Success rate: {snapshot.success_rate:.2f}%")
    lines.append("=" * REPORT_WIDTH)
    return "\n".join(lines)


class MetricsCounter:
    """Tallies attempt outcomes and reports them to the console and log.

    total always equals success + failure.
    """

    def __init__(self, logger: Logger, console: Console | None = None) -> None:
        self._logger = logger
        self._console = console or Console()
        self._total = 0
        self._success = 0
        self._failure = 0

    @property
    def total(self) -> int:
        return self._total

    @property
    def success(self) -> int:
        return self._success

    @property
    def failure(self) -> int:
        return self._failure

    def record_success(self) -> None:
        self._total += 1
        self._success += 1

    def record_failure(self) -> None:
        self._total += 1
        self._failure += 1

    def record(self, attempt: Attempt) -> None:
        """Count an evaluated attempt as a success or a failure."""
        if attempt.succeeded:
            self.record_success()
        else:
            self.record_failure()

    def snapshot(self) -> MetricsSnapshot:
        return MetricsSnapshot(
            total=self._total,
            success=self._success,
            failure=self._failure,
        )

    def show_metrics(self) -> MetricsSnapshot:
        """Print the report and log the same numbers. Counters are left as-is."""
        snapshot = self.snapshot()
        self._console.print(render_report(snapshot))
        self._logger.log_metrics(snapshot.total, snapshot.success, snapshot.failure)
        return snapshot
