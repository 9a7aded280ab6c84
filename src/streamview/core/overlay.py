"""Stream overlay: resolve an instrument's stream from a view mask."""

import logging

from streamview.core.aggregation import Aggregation
from streamview.core.models import Instrument, Stream
from streamview.core.ports import DiagnosticLoggerPort

logger = logging.getLogger(__name__)


def validate_aggregation(
    aggregation: Aggregation,
    log: DiagnosticLoggerPort | None = None,
) -> tuple[Aggregation | None, bool]:
    """Validate an aggregation override.

    An invalid aggregation is logged at error level and discarded instead of
    being raised, so the instrument still records with reader defaults.

    Args:
        aggregation: The aggregation taken from a view mask.
        log: Logger receiving the diagnostic (default: module logger).

    Returns:
        (copy of aggregation, True) when valid, (None, False) otherwise.
    """
    error = aggregation.err()
    if error is not None:
        (log or logger).error(
            "dropping invalid view aggregation: %s",
            error,
            exc_info=error,
            extra={"aggregation": repr(aggregation), "error": str(error)},
        )
        return None, False
    return aggregation.copy(), True


def apply_mask(
    instrument: Instrument,
    mask: Stream,
    log: DiagnosticLoggerPort | None = None,
) -> Stream:
    """Overlay non-empty mask fields onto the instrument's defaults.

    Args:
        instrument: The matched instrument.
        mask: Partially populated stream of overrides.
        log: Logger receiving aggregation diagnostics.

    Returns:
        A new, fully resolved Stream.
    """
    aggregation = None
    if mask.aggregation is not None:
        aggregation, _ = validate_aggregation(mask.aggregation, log)
    return resolve_stream(instrument, mask, aggregation)


def resolve_stream(
    instrument: Instrument,
    mask: Stream,
    aggregation: Aggregation | None,
) -> Stream:
    """Build the resolved stream from an already validated aggregation."""
    return Stream(
        name=mask.name or instrument.name,
        description=mask.description or instrument.description,
        unit=mask.unit or instrument.unit,
        aggregation=aggregation,
        attribute_filter=mask.attribute_filter,
    )


def default_stream(instrument: Instrument) -> Stream:
    """Stream used for an instrument that no view selects."""
    return Stream(
        name=instrument.name,
        description=instrument.description,
        unit=instrument.unit,
    )
