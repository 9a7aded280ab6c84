"""Views: select instruments and describe the streams they produce."""

import threading
from collections.abc import Callable

from streamview.core.aggregation import Aggregation
from streamview.core.criteria import match_criteria
from streamview.core.models import Instrument, Stream
from streamview.core.overlay import apply_mask, resolve_stream, validate_aggregation
from streamview.core.ports import DiagnosticLoggerPort


class View:
    """A configured (criteria, mask) pair.

    Calling a view with an instrument returns the resolved stream and whether
    the instrument was selected. Unselected instruments get an empty Stream
    and never reach the aggregation validator.

    Example:
        ```python
        view = View(Instrument(name="http.*"), Stream(aggregation=Drop()))
        stream, matched = view(instrument)
        ```
    """

    def __init__(
        self,
        criteria: Instrument,
        mask: Stream,
        *,
        logger: DiagnosticLoggerPort | None = None,
        validate_once: bool = False,
    ) -> None:
        """Initialize the view and compile its criteria.

        Args:
            criteria: Selection criteria; empty fields match anything.
            mask: Stream overrides applied to selected instruments.
            logger: Logger receiving invalid aggregation diagnostics
                (default: the overlay module logger).
            validate_once: If True, the mask aggregation is validated on the
                first match only and the verdict is reused afterwards.

        Raises:
            TypeError: If the criteria name is not a string.
        """
        self.criteria = criteria
        self.mask = mask
        self.logger = logger
        self.validate_once = validate_once
        self._matches = match_criteria(criteria)
        self._lock = threading.Lock()
        self._valid: bool | None = None

    def matches(self, instrument: Instrument) -> bool:
        """Return True if the instrument satisfies the view criteria."""
        return self._matches(instrument)

    def __call__(self, instrument: Instrument) -> tuple[Stream, bool]:
        """Resolve the stream for an instrument.

        Args:
            instrument: Instrument being registered.

        Returns:
            Tuple of (resolved stream, matched).
        """
        if not self._matches(instrument):
            return Stream(), False
        aggregation = self.mask.aggregation
        if not self.validate_once or aggregation is None:
            return apply_mask(instrument, self.mask, self.logger), True
        return resolve_stream(instrument, self.mask, self._verdict(aggregation)), True

    evaluate = __call__

    def _verdict(self, aggregation: Aggregation) -> Aggregation | None:
        with self._lock:
            if self._valid is None:
                validated, self._valid = validate_aggregation(aggregation, self.logger)
                return validated
        return aggregation.copy() if self._valid else None

    def __repr__(self) -> str:
        return f"View(criteria={self.criteria!r}, mask={self.mask!r})"


def new_view(
    criteria: Instrument,
    mask: Stream,
    logger: DiagnosticLoggerPort | None = None,
) -> Callable[[Instrument], tuple[Stream, bool]]:
    """Build a view callable from criteria and a mask.

    Args:
        criteria: Selection criteria; empty fields match anything.
        mask: Stream overrides applied to selected instruments.
        logger: Logger receiving invalid aggregation diagnostics.

    Returns:
        Callable mapping an instrument to (resolved stream, matched).
    """
    return View(criteria, mask, logger=logger)
