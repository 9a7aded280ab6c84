"""BDD step definitions for view resolution features."""

import logging
from collections.abc import Generator
from dataclasses import dataclass, field

import pytest
from pytest_bdd import given, parsers, then, when

from streamview.adapters.logging import DiagnosticHandler
from streamview.core.aggregation import ExplicitBucketHistogram
from streamview.core.models import Instrument, InstrumentKind, Stream
from streamview.core.view import View

# Quoted step arguments may be empty and never contain a double quote.
_QUOTED = r'[^"]*'


@dataclass
class ViewScenarioContext:
    """State shared between the steps of one scenario."""

    logger: logging.Logger | None = None
    handler: DiagnosticHandler = field(default_factory=DiagnosticHandler)
    view: View | None = None
    stream: Stream | None = None
    matched: bool | None = None

    def evaluate(self, instrument: Instrument) -> None:
        assert self.view is not None, "no view configured"
        self.stream, self.matched = self.view(instrument)


def _boundaries(text: str) -> list[float]:
    return [float(part) for part in text.split(",")]


@pytest.fixture
def ctx() -> Generator[ViewScenarioContext]:
    """Fresh scenario context for each test."""
    context = ViewScenarioContext()
    yield context
    if context.logger is not None:
        context.logger.removeHandler(context.handler)


# === Background Steps ===
@given("a diagnostic log capture")
def step_log_capture(ctx: ViewScenarioContext, request: pytest.FixtureRequest) -> None:
    ctx.logger = logging.getLogger(f"streamview.bdd.{request.node.name}")
    ctx.logger.propagate = False
    ctx.logger.addHandler(ctx.handler)


# === View Steps ===
@given(parsers.re(rf'a view selecting name "(?P<pattern>{_QUOTED})"$'))
def step_view_by_name(ctx: ViewScenarioContext, pattern: str) -> None:
    ctx.view = View(Instrument(name=pattern), Stream(), logger=ctx.logger)


@given(
    parsers.re(
        rf'a view selecting name "(?P<pattern>{_QUOTED})"'
        rf' that renames to "(?P<alt>{_QUOTED})"'
    )
)
def step_view_rename(ctx: ViewScenarioContext, pattern: str, alt: str) -> None:
    ctx.view = View(Instrument(name=pattern), Stream(name=alt), logger=ctx.logger)


@given(parsers.parse('a view selecting kind "{kind}"'))
def step_view_by_kind(ctx: ViewScenarioContext, kind: str) -> None:
    criteria = Instrument(kind=InstrumentKind[kind])
    ctx.view = View(criteria, Stream(name="unused"), logger=ctx.logger)


@given(
    parsers.re(
        rf'a view selecting name "(?P<pattern>{_QUOTED})"'
        rf' with histogram boundaries "(?P<bounds>{_QUOTED})"'
    )
)
def step_view_histogram(ctx: ViewScenarioContext, pattern: str, bounds: str) -> None:
    mask = Stream(aggregation=ExplicitBucketHistogram(_boundaries(bounds)))
    ctx.view = View(Instrument(name=pattern), mask, logger=ctx.logger)


# === Registration Steps ===
@when(
    parsers.re(
        rf'an instrument named "(?P<name>{_QUOTED})"'
        rf' with description "(?P<description>{_QUOTED})" is registered'
    )
)
def step_register_named(ctx: ViewScenarioContext, name: str, description: str) -> None:
    ctx.evaluate(Instrument(name=name, description=description))


@when(parsers.parse('an instrument of kind "{kind}" is registered'))
def step_register_kind(ctx: ViewScenarioContext, kind: str) -> None:
    ctx.evaluate(Instrument(name="foo", kind=InstrumentKind[kind]))


# === Assertion Steps ===
@then("the instrument is matched")
def step_matched(ctx: ViewScenarioContext) -> None:
    assert ctx.matched is True


@then("the instrument is not matched")
def step_not_matched(ctx: ViewScenarioContext) -> None:
    assert ctx.matched is False


@then(parsers.parse("the match result is {expected}"))
def step_match_result(ctx: ViewScenarioContext, expected: str) -> None:
    assert ctx.matched is (expected == "true")


@then(parsers.parse('the resolved stream has name "{name}"'))
def step_stream_name(ctx: ViewScenarioContext, name: str) -> None:
    assert ctx.stream is not None
    assert ctx.stream.name == name


@then(parsers.parse('the resolved stream has description "{description}"'))
def step_stream_description(ctx: ViewScenarioContext, description: str) -> None:
    assert ctx.stream is not None
    assert ctx.stream.description == description


@then("the resolved stream is empty")
def step_stream_empty(ctx: ViewScenarioContext) -> None:
    assert ctx.stream == Stream()


@then("the resolved stream has no aggregation")
def step_no_aggregation(ctx: ViewScenarioContext) -> None:
    assert ctx.stream is not None
    assert ctx.stream.aggregation is None


@then(parsers.parse('the resolved stream has histogram boundaries "{bounds}"'))
def step_histogram_boundaries(ctx: ViewScenarioContext, bounds: str) -> None:
    assert ctx.stream is not None
    assert ctx.stream.aggregation == ExplicitBucketHistogram(_boundaries(bounds))


@then("no diagnostics are emitted")
def step_no_diagnostics(ctx: ViewScenarioContext) -> None:
    assert ctx.handler.count() == 0


@then(parsers.parse("{count:d} error diagnostic is emitted"))
def step_error_diagnostics(ctx: ViewScenarioContext, count: int) -> None:
    assert ctx.handler.count("ERROR") == count
