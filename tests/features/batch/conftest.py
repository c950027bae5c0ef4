"""BDD step definitions for batch division monitoring."""

import io
from collections.abc import Iterator
from dataclasses import dataclass, field

import pytest
from pytest_bdd import given, parsers, then, when

from mathwatch.adapters.storage.in_memory import InMemoryLogSink
from mathwatch.config import DEFAULT_BATCH
from mathwatch.console import Console
from mathwatch.core.errors import ErrorKind
from mathwatch.core.logger import Logger
from mathwatch.core.metrics import MetricsCounter
from mathwatch.core.models import Attempt
from mathwatch.runner import BatchRunner


@dataclass
class BatchScenarioContext:
    """Mutable state shared between the steps of one scenario."""

    sink: InMemoryLogSink = field(default_factory=InMemoryLogSink)
    console: Console = field(
        default_factory=lambda: Console(out=io.StringIO(), err=io.StringIO())
    )
    logger: Logger | None = None
    counter: MetricsCounter | None = None
    attempts: list[Attempt] = field(default_factory=list)

    def runner(self) -> BatchRunner:
        assert self.logger is not None and self.counter is not None
        return BatchRunner(self.logger, self.counter, self.console)

    def close(self) -> None:
        if self.logger is not None:
            self.logger.close()


@pytest.fixture
def ctx() -> Iterator[BatchScenarioContext]:
    """Fresh scenario context for each test, closing its logger afterwards."""
    context = BatchScenarioContext()
    yield context
    context.close()


# === Background Steps ===
@given("an in-memory log sink")
def step_sink(ctx: BatchScenarioContext) -> None:
    ctx.logger = Logger(ctx.sink)


@given("a metrics counter")
def step_counter(ctx: BatchScenarioContext) -> None:
    assert ctx.logger is not None
    ctx.counter = MetricsCounter(ctx.logger, ctx.console)


# === Action Steps ===
@when(parsers.parse("{a} is divided by {b}"))
def step_divide(ctx: BatchScenarioContext, a: str, b: str) -> None:
    ctx.attempts = ctx.runner().run([(float(a), float(b))])


@when("the batch runs over the default operand pairs")
def step_default_batch(ctx: BatchScenarioContext) -> None:
    ctx.attempts = ctx.runner().run(DEFAULT_BATCH)


@when("the metrics are shown")
def step_show_metrics(ctx: BatchScenarioContext) -> None:
    assert ctx.counter is not None
    ctx.counter.show_metrics()


# === Outcome Steps ===
@then(parsers.parse("the result is {expected}"))
def step_result(ctx: BatchScenarioContext, expected: str) -> None:
    assert ctx.attempts[-1].result == float(expected)


@then(parsers.parse("the attempt fails with {kind}"))
def step_fails_with(ctx: BatchScenarioContext, kind: str) -> None:
    assert ctx.attempts[-1].error is ErrorKind[kind]


@then(
    parsers.parse(
        "the counters read total {total:d}, success {success:d}, failure {failure:d}"
    )
)
def step_counters(
    ctx: BatchScenarioContext, total: int, success: int, failure: int
) -> None:
    assert ctx.counter is not None
    assert (ctx.counter.total, ctx.counter.success, ctx.counter.failure) == (
        total,
        success,
        failure,
    )
    assert ctx.counter.total == ctx.counter.success + ctx.counter.failure


@then(parsers.parse('the log contains "{message}"'))
def step_log_contains(ctx: BatchScenarioContext, message: str) -> None:
    assert message in ctx.sink.messages()


@then(parsers.parse('the log ends with "{message}"'))
def step_log_ends_with(ctx: BatchScenarioContext, message: str) -> None:
    assert ctx.sink.messages()[-1] == message
