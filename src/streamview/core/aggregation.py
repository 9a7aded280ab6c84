"""Aggregation configuration values.

These describe which aggregation a stream uses and how it is configured.
They do not aggregate measurements; they only validate and copy themselves.
"""

import math
import numbers
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

DEFAULT_HISTOGRAM_BOUNDARIES = [
    0.0,
    5.0,
    10.0,
    25.0,
    50.0,
    75.0,
    100.0,
    250.0,
    500.0,
    1000.0,
]


class AggregationError(ValueError):
    """An aggregation's configuration is internally inconsistent."""


@runtime_checkable
class Aggregation(Protocol):
    """Protocol for aggregation configuration values.

    Implementations report configuration errors through err() rather than
    raising, and hand out independent copies through copy().
    """

    def err(self) -> Exception | None:
        """Return the configuration error, or None if the value is valid."""
        ...

    def copy(self) -> "Aggregation":
        """Return a copy that shares no mutable state with this value."""
        ...


@dataclass(frozen=True)
class Drop:
    """Drop all measurements of the stream."""

    def err(self) -> Exception | None:
        return None

    def copy(self) -> "Drop":
        return Drop()


@dataclass(frozen=True)
class Default:
    """Let the reader choose the aggregation for the instrument kind."""

    def err(self) -> Exception | None:
        return None

    def copy(self) -> "Default":
        return Default()


@dataclass(frozen=True)
class Sum:
    """Arithmetic sum of measurements."""

    def err(self) -> Exception | None:
        return None

    def copy(self) -> "Sum":
        return Sum()


@dataclass(frozen=True)
class LastValue:
    """Last measurement recorded."""

    def err(self) -> Exception | None:
        return None

    def copy(self) -> "LastValue":
        return LastValue()


@dataclass
class ExplicitBucketHistogram:
    """Histogram with explicitly configured bucket boundaries.

    Attributes:
        boundaries: Strictly increasing bucket upper bounds.
        no_min_max: If True, min and max are not recorded.
    """

    boundaries: list[float] = field(
        default_factory=lambda: list(DEFAULT_HISTOGRAM_BOUNDARIES)
    )
    no_min_max: bool = False

    def err(self) -> Exception | None:
        """Check that boundaries are numbers in strictly increasing order."""
        if not isinstance(self.boundaries, (list, tuple)):
            return AggregationError(
                f"histogram boundaries must be a list, got {self.boundaries!r}"
            )
        for boundary in self.boundaries:
            if isinstance(boundary, bool) or not isinstance(boundary, numbers.Real):
                return AggregationError(
                    f"histogram boundary {boundary!r} is not a real number"
                )
            if math.isnan(boundary):
                return AggregationError("histogram boundaries must not contain NaN")
        for lower, upper in zip(self.boundaries, self.boundaries[1:]):
            if lower >= upper:
                return AggregationError(
                    "histogram boundaries are not monotonically increasing: "
                    f"{self.boundaries}"
                )
        return None

    def copy(self) -> "ExplicitBucketHistogram":
        return ExplicitBucketHistogram(
            boundaries=list(self.boundaries),
            no_min_max=self.no_min_max,
        )
