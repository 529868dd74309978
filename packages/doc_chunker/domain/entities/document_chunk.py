#!/usr/bin/env python3
"""
Chunk entity representing a single text chunk.

This module defines the chunk produced by a chunking run together with the
positional metadata downstream consumers need to re-locate it.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class DocumentChunk:
    """
    Entity representing a single text chunk.

    ``content`` is always ``source[start_char:end_char]``. The metadata dict
    carries the engine fields (``start_char``, ``end_char``, ``overlap``,
    ``chunk_size``, ``strategy`` and, for markdown sections, ``section_heading``)
    on top of any caller-supplied metadata.
    """

    id: str
    content: str
    index: int  # 0-based position within the run
    total_chunks: int
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def start_char(self) -> int:
        """Offset of the first character in the source text."""
        return self.metadata["start_char"]

    @property
    def end_char(self) -> int:
        """Offset one past the last character in the source text."""
        return self.metadata["end_char"]

    @property
    def overlap(self) -> int:
        """Leading characters shared with the previous chunk."""
        return self.metadata["overlap"]

    @property
    def section_heading(self) -> str | None:
        return self.metadata.get("section_heading")

    @property
    def contextual_content(self) -> str:
        """
        Content prefixed with its owning heading when it does not already start with it.

        Markdown sections split into several chunks keep their heading only in
        the first one; this view makes each of them self-describing without
        breaking the offset contract of ``content``.
        """
        heading = self.section_heading
        if not heading or self.content.lstrip().startswith(heading):
            return self.content
        return f"{heading}\n\n{self.content}"

    def to_dict(self) -> dict[str, Any]:
        """Convert chunk to a JSON-serialisable dictionary."""
        return {
            "id": self.id,
            "content": self.content,
            "index": self.index,
            "total_chunks": self.total_chunks,
            "metadata": dict(self.metadata),
        }

    def __repr__(self) -> str:
        """String representation of the chunk."""
        preview = self.content[:50] + "..." if len(self.content) > 50 else self.content
        return (
            f"DocumentChunk(id={self.id}, "
            f"index={self.index}, "
            f"span=[{self.start_char}, {self.end_char}), "
            f"content={preview!r})"
        )
