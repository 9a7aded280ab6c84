"""Core domain models for instruments and metric streams."""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from streamview.core.aggregation import Aggregation

# Common unit tokens.
DIMENSIONLESS = "1"
BYTES = "By"
MILLISECONDS = "ms"


class InstrumentKind(Enum):
    """The kind of an instrument, fixed when it is created."""

    SYNC_COUNTER = "sync_counter"
    SYNC_UP_DOWN_COUNTER = "sync_up_down_counter"
    SYNC_HISTOGRAM = "sync_histogram"
    ASYNC_COUNTER = "async_counter"
    ASYNC_UP_DOWN_COUNTER = "async_up_down_counter"
    ASYNC_GAUGE = "async_gauge"


@dataclass(frozen=True)
class Scope:
    """The instrumentation scope that created an instrument.

    Attributes:
        name: Name of the instrumenting library.
        version: Version of the instrumenting library.
        schema_url: Schema URL of the telemetry it emits.
    """

    name: str = ""
    version: str = ""
    schema_url: str = ""


@dataclass(frozen=True)
class Instrument:
    """Description of a measurement source.

    The same type is used as view selection criteria, where an empty field
    places no constraint on the candidate instrument.

    Attributes:
        name: Instrument name (e.g., http_requests_total).
        description: Free-text description.
        kind: Instrument kind, None when unset.
        unit: Unit token (e.g., "By", "ms", "1").
        scope: Instrumentation scope that created the instrument.
    """

    name: str = ""
    description: str = ""
    kind: InstrumentKind | None = None
    unit: str = ""
    scope: Scope = field(default_factory=Scope)


@dataclass(frozen=True)
class KeyValue:
    """A single attribute key-value pair."""

    key: str
    value: str | int | float | bool


AttributeFilter = Callable[[KeyValue], bool]


@dataclass(frozen=True)
class Stream:
    """The shape under which an instrument's measurements are exported.

    As a view mask, empty strings and None mean "do not override".

    Attributes:
        name: Stream name.
        description: Stream description.
        unit: Stream unit.
        aggregation: Aggregation to use; None lets the reader choose.
        attribute_filter: Predicate deciding which attributes are kept;
            None keeps all attributes.
    """

    name: str = ""
    description: str = ""
    unit: str = ""
    aggregation: "Aggregation | None" = None
    attribute_filter: AttributeFilter | None = None


@dataclass(frozen=True)
class DiagnosticRecord:
    """A structured diagnostic log record.

    Attributes:
        timestamp: Unix timestamp in seconds.
        level: Log level (e.g., INFO, ERROR, DEBUG).
        message: The log message.
        attributes: Additional structured fields.
    """

    timestamp: float
    level: str
    message: str
    attributes: dict[str, str | int | float | bool] = field(default_factory=dict)
