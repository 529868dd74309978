#!/usr/bin/env python3
"""Summary metrics for a completed chunking run."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class ChunkingStats:
    """
    Observed statistics of a chunking result.

    ``min_chunk_size`` and ``max_chunk_size`` are measured over the produced
    chunks, not taken from the configuration.
    """

    total_chunks: int
    avg_chunk_size: float
    min_chunk_size: int
    max_chunk_size: int
    total_characters: int
    strategy: str
    processing_time_ms: float

    def to_dict(self) -> dict[str, Any]:
        """Convert stats to dictionary."""
        return asdict(self)
