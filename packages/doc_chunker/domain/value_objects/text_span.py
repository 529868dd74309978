#!/usr/bin/env python3
"""
Raw character span value object.

Strategies describe their output as spans into the source text; the
post-processor turns them into chunks. Spans never hold text themselves, so
every offset stays meaningful against the original document.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TextSpan:
    """Half-open ``[start, end)`` range of the source text."""

    start: int
    end: int
    heading: str | None = None  # Owning markdown heading, if any

    def __post_init__(self) -> None:
        """Validate span boundaries."""
        if self.start < 0:
            raise ValueError(f"Span start must be non-negative, got {self.start}")
        if self.end < self.start:
            raise ValueError(f"Span end ({self.end}) must not precede start ({self.start})")

    @property
    def length(self) -> int:
        """Number of characters covered by the span."""
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.end == self.start

    def slice(self, text: str) -> str:
        """Return the covered substring of ``text``."""
        return text[self.start : self.end]

    def merge(self, other: "TextSpan") -> "TextSpan":
        """
        Combine two adjacent or overlapping spans into one.

        The earliest non-empty heading wins so a merged span keeps describing
        the section it starts in.
        """
        first, second = (self, other) if self.start <= other.start else (other, self)
        return TextSpan(
            start=first.start,
            end=max(first.end, second.end),
            heading=first.heading or second.heading,
        )

    def with_bounds(self, start: int, end: int) -> "TextSpan":
        """Return a span with new bounds and the same heading."""
        return TextSpan(start=start, end=end, heading=self.heading)
