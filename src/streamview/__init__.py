"""streamview - instrument-to-stream view resolution for metrics SDKs."""

from streamview.adapters.logging import DiagnosticHandler
from streamview.core.aggregation import (
    Aggregation,
    AggregationError,
    Default,
    Drop,
    ExplicitBucketHistogram,
    LastValue,
    Sum,
)
from streamview.core.criteria import match_criteria
from streamview.core.models import (
    BYTES,
    DIMENSIONLESS,
    MILLISECONDS,
    AttributeFilter,
    DiagnosticRecord,
    Instrument,
    InstrumentKind,
    KeyValue,
    Scope,
    Stream,
)
from streamview.core.overlay import apply_mask, default_stream, validate_aggregation
from streamview.core.pattern import compile_pattern
from streamview.core.ports import DiagnosticLoggerPort
from streamview.core.registry import ViewRegistry
from streamview.core.view import View, new_view

__all__ = [
    "BYTES",
    "DIMENSIONLESS",
    "MILLISECONDS",
    "Aggregation",
    "AggregationError",
    "AttributeFilter",
    "Default",
    "DiagnosticHandler",
    "DiagnosticLoggerPort",
    "DiagnosticRecord",
    "Drop",
    "ExplicitBucketHistogram",
    "Instrument",
    "InstrumentKind",
    "KeyValue",
    "LastValue",
    "Scope",
    "Stream",
    "Sum",
    "View",
    "ViewRegistry",
    "apply_mask",
    "compile_pattern",
    "default_stream",
    "match_criteria",
    "new_view",
    "validate_aggregation",
]
