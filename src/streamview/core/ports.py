"""Port interfaces consumed by the view engine.

The core depends only on these protocols; a ``logging.Logger`` satisfies
DiagnosticLoggerPort, as does any test double with an ``error`` method.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DiagnosticLoggerPort(Protocol):
    """Port for emitting diagnostic records."""

    def error(self, msg: object, *args: Any, **kwargs: Any) -> None:
        """Emit an error-level diagnostic record."""
        ...
