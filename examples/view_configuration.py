"""Configure views for a set of instruments and print the resolved streams."""

import logging

from streamview import (
    MILLISECONDS,
    DiagnosticHandler,
    Drop,
    ExplicitBucketHistogram,
    Instrument,
    InstrumentKind,
    KeyValue,
    Scope,
    Stream,
    View,
    ViewRegistry,
)

logger = logging.getLogger("view_configuration")


def main() -> None:
    handler = DiagnosticHandler()
    logger.addHandler(handler)

    registry = ViewRegistry()
    registry.register(
        View(
            Instrument(name="http.server.*", kind=InstrumentKind.SYNC_HISTOGRAM),
            Stream(
                unit=MILLISECONDS,
                aggregation=ExplicitBucketHistogram([5, 10, 50, 100, 500]),
                attribute_filter=lambda kv: kv.key in {"http.method", "http.route"},
            ),
            logger=logger,
        )
    )
    registry.register(
        View(Instrument(scope=Scope(name="noisy.lib")), Stream(aggregation=Drop()))
    )
    # Unordered boundaries: logged and replaced by the reader default.
    registry.register(
        View(
            Instrument(name="queue.depth"),
            Stream(aggregation=ExplicitBucketHistogram([10, 1])),
            logger=logger,
        )
    )

    instruments = [
        Instrument(
            name="http.server.duration",
            kind=InstrumentKind.SYNC_HISTOGRAM,
            unit="s",
            scope=Scope(name="web"),
        ),
        Instrument(name="cache.hits", scope=Scope(name="noisy.lib")),
        Instrument(name="queue.depth", kind=InstrumentKind.ASYNC_GAUGE),
        Instrument(name="jobs.completed", kind=InstrumentKind.SYNC_COUNTER),
    ]
    for instrument in instruments:
        for stream in registry.resolve(instrument):
            print(f"{instrument.name} -> {stream.name} [{stream.unit}]")
            print(f"  aggregation: {stream.aggregation!r}")
            if stream.attribute_filter is not None:
                kept = stream.attribute_filter(KeyValue("http.method", "GET"))
                print(f"  keeps http.method: {kept}")

    for record in handler.records:
        print(f"{record.level}: {record.message}")


if __name__ == "__main__":
    main()
