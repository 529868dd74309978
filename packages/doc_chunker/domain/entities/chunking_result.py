#!/usr/bin/env python3
"""
ChunkingResult entity representing the output of one chunking run.

The result is owned by the caller; nothing inside the engine keeps a
reference to it once ``chunk()`` returns.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from doc_chunker.domain.entities.document_chunk import DocumentChunk


@dataclass(frozen=True)
class ChunkingResult:
    """Ordered chunks of a single document plus run-level information."""

    chunks: tuple[DocumentChunk, ...]
    strategy: str
    processing_time_ms: float
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def total_chunks(self) -> int:
        """Get the number of chunks in the result."""
        return len(self.chunks)

    @property
    def avg_chunk_size(self) -> float:
        """Mean chunk length in characters."""
        if not self.chunks:
            return 0.0
        return sum(len(chunk.content) for chunk in self.chunks) / len(self.chunks)

    def __iter__(self) -> Iterator[DocumentChunk]:
        """Iterate over chunks in order."""
        return iter(self.chunks)

    def __len__(self) -> int:
        return len(self.chunks)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the result to a JSON-serialisable dictionary.

        Used by the export layer; the structure mirrors the entity without
        altering any chunk.
        """
        return {
            "chunks": [chunk.to_dict() for chunk in self.chunks],
            "total_chunks": self.total_chunks,
            "avg_chunk_size": self.avg_chunk_size,
            "strategy": self.strategy,
            "processing_time_ms": self.processing_time_ms,
            "metadata": dict(self.metadata),
        }
