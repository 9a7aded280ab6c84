"""Registry of views applied at instrument registration."""

from collections.abc import Callable, Iterator

from streamview.core.models import Instrument, Stream
from streamview.core.overlay import default_stream

ViewFunc = Callable[[Instrument], tuple[Stream, bool]]


class ViewRegistry:
    """Ordered collection of views resolving streams for instruments.

    Every matching view contributes one stream. An instrument no view
    selects is exported under its default stream.
    """

    def __init__(self, views: list[ViewFunc] | None = None) -> None:
        self._views: list[ViewFunc] = []
        for view in views or []:
            self.register(view)

    def register(self, view: ViewFunc) -> None:
        """Register a view.

        Args:
            view: Callable mapping an instrument to (stream, matched).

        Raises:
            TypeError: If view is not callable.
        """
        if not callable(view):
            raise TypeError(f"view must be callable, got {type(view).__name__}")
        self._views.append(view)

    def resolve(self, instrument: Instrument) -> list[Stream]:
        """Resolve the streams an instrument is exported under.

        Args:
            instrument: Instrument being registered.

        Returns:
            Streams of all matching views in registration order, or the
            instrument's default stream when none match.
        """
        streams = []
        for view in self._views:
            stream, matched = view(instrument)
            if matched:
                streams.append(stream)
        return streams or [default_stream(instrument)]

    def __len__(self) -> int:
        return len(self._views)

    def __iter__(self) -> Iterator[ViewFunc]:
        return iter(list(self._views))
