"""Shared test fixtures for all test modules."""

import logging
from collections.abc import Generator

import pytest

from streamview.adapters.logging import DiagnosticHandler
from streamview.core.models import BYTES, Instrument, InstrumentKind, Scope

SCHEMA_URL = "https://opentelemetry.io/schemas/1.0.0"


@pytest.fixture
def complete_instrument() -> Instrument:
    """Instrument with every field populated."""
    return Instrument(
        name="foo",
        description="foo desc",
        kind=InstrumentKind.SYNC_COUNTER,
        unit=BYTES,
        scope=Scope(name="TestNewViewMatch", version="v0.1.0", schema_url=SCHEMA_URL),
    )


@pytest.fixture
def diagnostics(
    request: pytest.FixtureRequest,
) -> Generator[tuple[logging.Logger, DiagnosticHandler]]:
    """Isolated logger with a DiagnosticHandler capturing its records.

    Returns a tuple of (logger, handler). The logger does not propagate, so
    records never leak into other tests.
    """
    logger = logging.getLogger(f"streamview.tests.{request.node.name}")
    logger.propagate = False
    logger.setLevel(logging.DEBUG)
    handler = DiagnosticHandler()
    logger.addHandler(handler)
    yield logger, handler
    logger.removeHandler(handler)


@pytest.fixture
def overlay_log_capture() -> Generator[DiagnosticHandler]:
    """DiagnosticHandler attached to the default overlay module logger."""
    logger = logging.getLogger("streamview.core.overlay")
    handler = DiagnosticHandler()
    logger.addHandler(handler)
    yield handler
    logger.removeHandler(handler)
