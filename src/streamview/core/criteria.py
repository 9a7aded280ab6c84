"""Criteria matching of instruments against view selection criteria."""

from collections.abc import Callable

from streamview.core.models import Instrument
from streamview.core.pattern import compile_pattern


def _any(_: Instrument) -> bool:
    return True


def _name_matcher(criteria: Instrument) -> Callable[[Instrument], bool]:
    if not criteria.name:
        return _any
    match_name = compile_pattern(criteria.name)
    return lambda instrument: match_name(instrument.name)


def _exact(
    want: object, get: Callable[[Instrument], object]
) -> Callable[[Instrument], bool]:
    """Require an exact field value unless the criteria left it empty."""
    if want is None or want == "":
        return _any
    return lambda instrument: get(instrument) == want


def match_criteria(criteria: Instrument) -> Callable[[Instrument], bool]:
    """Build a predicate selecting instruments that satisfy the criteria.

    Empty criteria fields place no constraint, so criteria with every field
    empty select every instrument. The name supports ``*`` and ``?``
    wildcards; all other fields must match exactly.

    Args:
        criteria: Instrument-shaped selection criteria.

    Returns:
        Predicate over candidate instruments.
    """
    scope = criteria.scope
    checks = [
        _name_matcher(criteria),
        _exact(criteria.description, lambda i: i.description),
        _exact(criteria.kind, lambda i: i.kind),
        _exact(criteria.unit, lambda i: i.unit),
        _exact(scope.name, lambda i: i.scope.name),
        _exact(scope.version, lambda i: i.scope.version),
        _exact(scope.schema_url, lambda i: i.scope.schema_url),
    ]
    active = tuple(check for check in checks if check is not _any)

    def matches(instrument: Instrument) -> bool:
        return all(check(instrument) for check in active)

    return matches
