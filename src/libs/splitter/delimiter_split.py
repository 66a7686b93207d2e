"""Single-character delimiter splitting.

Splits follow the rules of JavaScript's ``String.prototype.split`` with a
one-character separator: every delimiter ends the current segment (which
may be empty) and the segment after the last delimiter is always kept.

    >>> [s.text for s in split("abaabaaabbabbbabb", "b")]
    ['a', 'aa', 'aaa', '', 'a', '', '', 'a', '', '']

Three call shapes are provided:

- :func:`split` returns every segment.
- :func:`split_bounded` returns exactly ``maximum`` slots and stops
  searching once they are filled. Unfilled slots hold
  :meth:`Segment.empty`.
- :func:`split_bounded_with_count` does the same and also reports how many
  leading slots are real.

Segments are views into the input string. :func:`split_strings` returns
plain ``str`` copies instead.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, NamedTuple, Optional, Tuple

from src.libs.splitter.segment import Segment

logger = logging.getLogger(__name__)


class BoundedSplit(NamedTuple):
    """Result of :func:`split_bounded_with_count`.

    Attributes:
        slots: Exactly ``maximum`` slots; the first ``count`` are real.
        count: Number of valid leading slots.
    """

    slots: Tuple[Segment, ...]
    count: int

    @property
    def segments(self) -> Tuple[Segment, ...]:
        return self.slots[: self.count]


def _validate(text: str, delimiter: str, maximum: Optional[int] = None) -> None:
    if not isinstance(text, str):
        raise TypeError(f"text must be a string, got: {type(text).__name__}")
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ValueError(f"delimiter must be a single character, got: {delimiter!r}")
    if maximum is not None:
        if isinstance(maximum, bool) or not isinstance(maximum, int) or maximum < 0:
            raise ValueError(f"maximum must be a non-negative integer, got: {maximum!r}")


def _scan(text: str, delimiter: str, limit: Optional[int]) -> Iterator[Segment]:
    """Yield segments left to right, at most ``limit`` of them."""
    start = 0
    emitted = 0
    while limit is None or emitted < limit:
        index = text.find(delimiter, start)
        if index == -1:
            yield Segment(text, start, len(text))
            return
        yield Segment(text, start, index)
        emitted += 1
        start = index + 1
    logger.debug("Bounded split stopped at offset %d after %d segments", start, emitted)


def split(text: str, delimiter: str) -> List[Segment]:
    """Split ``text`` on every occurrence of ``delimiter``.

    Args:
        text: Input string. An empty string yields one empty segment.
        delimiter: A single character.

    Returns:
        ``text.count(delimiter) + 1`` segments in source order.

    Raises:
        TypeError: If ``text`` is not a string.
        ValueError: If ``delimiter`` is not exactly one character.
    """
    _validate(text, delimiter)
    return list(_scan(text, delimiter, None))


def split_bounded_with_count(text: str, delimiter: str, maximum: int) -> BoundedSplit:
    """Split into at most ``maximum`` segments and report how many were written.

    Scanning ends as soon as ``maximum`` segments exist, so whatever follows
    in the input is never searched. If the input runs out first, the
    trailing segment takes the next free slot.

    Args:
        text: Input string.
        delimiter: A single character.
        maximum: Capacity of the result; zero returns no slots.

    Returns:
        A :class:`BoundedSplit` with ``maximum`` slots and the valid count.

    Raises:
        TypeError: If ``text`` is not a string.
        ValueError: If ``delimiter`` or ``maximum`` is invalid.
    """
    _validate(text, delimiter, maximum)
    count = 0
    slots: List[Segment] = []
    for segment in _scan(text, delimiter, maximum):
        slots.append(segment)
        count += 1
    slots.extend([Segment.empty()] * (maximum - count))
    return BoundedSplit(tuple(slots), count)


def split_bounded(text: str, delimiter: str, maximum: int) -> Tuple[Segment, ...]:
    """Split into exactly ``maximum`` slots without reporting a count.

    Unfilled slots hold :meth:`Segment.empty`, which compares equal to a
    genuinely empty segment. Check ``is_default`` on a slot, or use
    :func:`split_bounded_with_count`, to tell them apart.
    """
    return split_bounded_with_count(text, delimiter, maximum).slots


def split_strings(text: str, delimiter: str, maximum: Optional[int] = None) -> List[str]:
    """Like :func:`split` but return owned string copies.

    When ``maximum`` is given, only the valid segments of a bounded split
    are returned.
    """
    if maximum is None:
        segments = split(text, delimiter)
    else:
        segments = list(split_bounded_with_count(text, delimiter, maximum).segments)
    return [segment.text for segment in segments]
