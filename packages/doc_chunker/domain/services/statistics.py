#!/usr/bin/env python3
"""Statistics aggregation over completed chunking runs."""

from doc_chunker.domain.entities.chunking_result import ChunkingResult
from doc_chunker.domain.value_objects.chunking_stats import ChunkingStats


def compute_stats(result: ChunkingResult) -> ChunkingStats:
    """
    Compute summary metrics for a chunking result.

    Pure and idempotent: the result is only read. Empty results report zero
    for every size metric.

    Args:
        result: Completed chunking result

    Returns:
        Observed chunk count, mean/min/max length, total characters, strategy
        and the recorded processing time
    """
    sizes = [len(chunk.content) for chunk in result.chunks]
    total_characters = sum(sizes)

    return ChunkingStats(
        total_chunks=len(sizes),
        avg_chunk_size=total_characters / len(sizes) if sizes else 0.0,
        min_chunk_size=min(sizes, default=0),
        max_chunk_size=max(sizes, default=0),
        total_characters=total_characters,
        strategy=result.strategy,
        processing_time_ms=result.processing_time_ms,
    )
