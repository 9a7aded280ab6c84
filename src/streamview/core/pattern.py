"""Wildcard pattern compilation for instrument name selection.

Patterns support two wildcards: ``?`` matches exactly one character and
``*`` matches any run of characters, including none. Every other character
is matched literally and the pattern must account for the whole subject.

A pattern is split on runs of ``*`` into fixed-length segments. The first
segment is anchored at the start of the subject, the last at the end, and
each middle segment is placed at its leftmost occurrence after the previous
one. Matching never backtracks across a ``*``, so it is bounded by the
product of subject and pattern length.
"""

import re
from collections.abc import Callable

_WILDCARDS = frozenset("*?")
_STARS = re.compile(r"\*+")


def has_wildcard(pattern: str) -> bool:
    """Return True if the pattern contains ``*`` or ``?``."""
    return any(char in _WILDCARDS for char in pattern)


def split_segments(pattern: str) -> list[str]:
    """Split a pattern on runs of ``*``.

    The result always has one more element than the pattern has star runs;
    leading or trailing stars produce empty first or last segments.
    """
    return _STARS.split(pattern)


def _compile_segment(segment: str) -> re.Pattern[str]:
    """Compile a star-free segment; ``?`` matches any single character."""
    source = "".join("." if char == "?" else re.escape(char) for char in segment)
    return re.compile(source, re.DOTALL)


def compile_pattern(pattern: str) -> Callable[[str], bool]:
    """Compile a wildcard pattern into a predicate over strings.

    Args:
        pattern: Selection string using ``*`` and ``?`` wildcards.

    Returns:
        Predicate returning True when the whole subject matches.

    Raises:
        TypeError: If pattern is not a string.
    """
    if not isinstance(pattern, str):
        raise TypeError(f"pattern must be a string, got {type(pattern).__name__}")

    if not has_wildcard(pattern):
        return lambda subject: subject == pattern

    segments = split_segments(pattern)
    if len(segments) == 1:
        only = _compile_segment(pattern)
        return lambda subject: only.fullmatch(subject) is not None

    head_len, tail_len = len(segments[0]), len(segments[-1])
    head = _compile_segment(segments[0])
    tail = _compile_segment(segments[-1])
    middle = [_compile_segment(segment) for segment in segments[1:-1]]

    def match(subject: str) -> bool:
        end = len(subject) - tail_len
        if end < head_len:
            return False
        if head.match(subject, 0, head_len) is None:
            return False
        if tail.fullmatch(subject, end) is None:
            return False
        pos = head_len
        for segment in middle:
            found = segment.search(subject, pos, end)
            if found is None:
                return False
            pos = found.end()
        return True

    return match
