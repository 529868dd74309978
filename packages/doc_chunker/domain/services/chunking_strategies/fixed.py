#!/usr/bin/env python3
"""
Fixed-size segmentation strategy.

Slides a ``chunk_size`` window over the text in steps of
``chunk_size - chunk_overlap``. This is the only strategy that produces
overlapping spans itself.
"""

from doc_chunker.domain.services.chunking_strategies.base import ChunkingStrategy
from doc_chunker.domain.value_objects.chunk_config import ChunkConfig
from doc_chunker.domain.value_objects.text_span import TextSpan


class FixedSizeChunkingStrategy(ChunkingStrategy):
    """Baseline sliding-window strategy."""

    applies_overlap = True

    def __init__(self, config: ChunkConfig) -> None:
        """Initialize the fixed-size strategy."""
        super().__init__("fixed", config)

    def segment_range(self, text: str, start: int, end: int) -> list[TextSpan]:
        size = self._config.chunk_size
        step = self._config.step

        spans: list[TextSpan] = []
        position = start
        while position < end:
            window_end = min(position + size, end)
            spans.append(TextSpan(position, window_end))
            if window_end >= end:
                break
            position += step
        return spans

    def estimate_chunks(self, content_length: int) -> int:
        """
        Number of windows produced for a text of the given length.

        Args:
            content_length: Length of content in characters

        Returns:
            ``max(1, ceil((length - overlap) / step))`` for non-empty text
        """
        if content_length <= 0:
            return 0
        overlap = self._config.chunk_overlap
        step = self._config.step
        return max(1, -(-(content_length - overlap) // step))
