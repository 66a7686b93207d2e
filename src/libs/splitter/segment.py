"""Segment views produced by the delimiter splitter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True, eq=False)
class Segment:
    """A view of ``source[start:end]``.

    The segment keeps a reference to its source string instead of copying
    the characters. Equality and hashing go through :attr:`text`, so two
    segments compare equal when they show the same characters, and a
    segment compares equal to a plain ``str`` with the same content.

    Attributes:
        source: The string the segment points into.
        start: Offset of the first character (inclusive).
        end: Offset one past the last character (exclusive).
        is_default: True only for the marker returned by :meth:`empty`,
            which fills unused slots of a bounded split.
    """

    source: str
    start: int
    end: int
    is_default: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.start <= self.end <= len(self.source):
            raise ValueError(
                f"Segment bounds [{self.start}, {self.end}) fall outside "
                f"source of length {len(self.source)}"
            )

    @classmethod
    def empty(cls) -> "Segment":
        """Return the default marker for an unfilled slot."""
        return cls(source="", start=0, end=0, is_default=True)

    @property
    def text(self) -> str:
        return self.source[self.start:self.end]

    def __len__(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return self.text

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Segment):
            return self.text == other.text
        if isinstance(other, str):
            return self.text == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.text)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "text": self.text,
            "start_offset": self.start,
            "end_offset": self.end,
        }
