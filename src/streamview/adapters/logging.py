"""Python logging handler adapter for view diagnostics.

This adapter captures records emitted through Python's standard library
logging module as DiagnosticRecord objects, giving hosts and tests an
inspectable sink for the errors the view engine logs.
"""

import logging
import threading
import traceback

from streamview.core.models import DiagnosticRecord

# Standard LogRecord attributes that should not be treated as extra fields
_STANDARD_LOGRECORD_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)

# Default attributes to extract from LogRecord
_DEFAULT_INCLUDE_ATTRS = ["module", "funcName", "lineno"]


class DiagnosticHandler(logging.Handler):
    """Logging handler that keeps log records as DiagnosticRecord objects.

    Example:
        ```python
        from streamview import DiagnosticHandler

        handler = DiagnosticHandler()
        logging.getLogger("streamview").addHandler(handler)
        ...
        handler.count("ERROR")
        ```
    """

    def __init__(
        self,
        level: int = logging.NOTSET,
        include_attrs: list[str] | None = None,
    ) -> None:
        """Initialize the handler.

        Args:
            level: Minimum level of records to capture.
            include_attrs: List of LogRecord attributes to include. Defaults to
                ["module", "funcName", "lineno"].
        """
        super().__init__(level)
        self._include_attrs = include_attrs or _DEFAULT_INCLUDE_ATTRS
        self._records: list[DiagnosticRecord] = []
        self._records_lock = threading.Lock()

    @property
    def records(self) -> list[DiagnosticRecord]:
        """Captured records, oldest first."""
        with self._records_lock:
            return list(self._records)

    def count(self, level: str | None = None) -> int:
        """Return the number of captured records, optionally of one level."""
        return sum(1 for r in self.records if level is None or r.level == level)

    def clear(self) -> None:
        """Discard all captured records."""
        with self._records_lock:
            self._records.clear()

    def emit(self, record: logging.LogRecord) -> None:
        """Capture a log record.

        Args:
            record: The log record to capture.
        """
        entry = DiagnosticRecord(
            timestamp=record.created,
            level=record.levelname,
            message=record.getMessage(),
            attributes=self._attributes(record),
        )
        with self._records_lock:
            self._records.append(entry)

    def _attributes(
        self, record: logging.LogRecord
    ) -> dict[str, str | int | float | bool]:
        source: dict[str, str | int | float | bool] = {
            "module": record.name,
            "funcName": record.funcName or "",
            "lineno": record.lineno,
            "pathname": record.pathname,
        }
        attributes = {k: source[k] for k in self._include_attrs if k in source}
        attributes.update(_extra_fields(record))
        attributes.update(_exception_fields(record))
        return attributes


def _extra_fields(record: logging.LogRecord) -> dict[str, str | int | float | bool]:
    """Scalar fields passed through the extra argument of a logging call."""
    return {
        key: value
        for key, value in vars(record).items()
        if key not in _STANDARD_LOGRECORD_ATTRS
        and isinstance(value, (str, int, float, bool))
    }


def _exception_fields(record: logging.LogRecord) -> dict[str, str]:
    """Exception type, message and traceback of the record, if any."""
    if not record.exc_info:
        return {}
    exc_type, exc_value, exc_tb = record.exc_info
    fields: dict[str, str] = {}
    if exc_type is not None:
        fields["exc_type"] = exc_type.__name__
    if exc_value is not None:
        fields["exc_message"] = str(exc_value)
    # Errors logged without being raised carry no traceback.
    if exc_tb is not None:
        fields["exc_traceback"] = "".join(
            traceback.format_exception(exc_type, exc_value, exc_tb)
        )
    return fields
