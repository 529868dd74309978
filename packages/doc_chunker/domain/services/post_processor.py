#!/usr/bin/env python3
"""
Boundary post-processing for raw strategy spans.

Strategies only choose split points. This service turns their spans into the
final chunk sequence and enforces the run-wide invariants:

1. separator trimming (only when ``keep_separator`` is off)
2. runt merging against ``min_chunk_size``
3. overlap injection (every strategy except fixed, which overlaps natively)
4. hard splitting against ``max_chunk_size``

All offsets stay in source-text coordinates throughout.
"""

import logging
from typing import Any

from doc_chunker.domain.entities.document_chunk import DocumentChunk
from doc_chunker.domain.services.chunking_strategies.base import ChunkingStrategy
from doc_chunker.domain.value_objects.chunk_config import ChunkConfig
from doc_chunker.domain.value_objects.text_span import TextSpan

logger = logging.getLogger(__name__)


class BoundaryPostProcessor:
    """Enforces size and overlap invariants on strategy output."""

    def __init__(self, config: ChunkConfig) -> None:
        """
        Initialize the post-processor.

        Args:
            config: Validated chunking configuration
        """
        self._config = config

    def process(
        self,
        text: str,
        spans: list[TextSpan],
        strategy: ChunkingStrategy,
        metadata: dict[str, Any] | None = None,
    ) -> list[DocumentChunk]:
        """
        Build the final chunks for a document.

        Args:
            text: Original source text
            spans: Ordered raw spans produced by the strategy
            strategy: Strategy that produced the spans
            metadata: Caller metadata merged into every chunk

        Returns:
            Ordered chunks satisfying the size and overlap invariants
        """
        final_spans = self.finalize_spans(text, spans, native_overlap=strategy.applies_overlap)
        return self._build_chunks(text, final_spans, strategy.name, metadata or {})

    def finalize_spans(self, text: str, spans: list[TextSpan], native_overlap: bool = False) -> list[TextSpan]:
        """
        Apply trimming, runt merging, overlap injection and hard splitting.

        Args:
            text: Original source text
            spans: Ordered raw spans
            native_overlap: True when the spans already overlap

        Returns:
            Final spans, each at most ``max_chunk_size`` long
        """
        if self._config.keep_separator:
            spans = [span for span in spans if not span.is_empty]
        else:
            spans = self._trim_separators(text, spans)

        spans = self._merge_runts(spans)

        if not native_overlap and self._config.chunk_overlap > 0:
            spans = self._inject_overlap(text, spans)

        return self._split_oversize(spans)

    @staticmethod
    def _trim_separators(text: str, spans: list[TextSpan]) -> list[TextSpan]:
        """Cut boundary whitespace from every span and drop blank spans."""
        trimmed: list[TextSpan] = []
        for span in spans:
            start, end = span.start, span.end
            while start < end and text[start].isspace():
                start += 1
            while end > start and text[end - 1].isspace():
                end -= 1
            if end > start:
                trimmed.append(span.with_bounds(start, end))
        return trimmed

    def _merge_runts(self, spans: list[TextSpan]) -> list[TextSpan]:
        """
        Merge spans shorter than ``min_chunk_size`` into a neighbour.

        A runt joins the preceding span; if that would exceed
        ``max_chunk_size`` it joins the following one instead. A trailing runt
        that fits nowhere still joins the preceding span and is rebalanced by
        the hard split.
        """
        min_size = self._config.min_chunk_size
        max_size = self._config.max_chunk_size
        if min_size <= 0 or len(spans) <= 1:
            return spans

        merged: list[TextSpan] = []
        carry: TextSpan | None = None
        last_index = len(spans) - 1

        for i, span in enumerate(spans):
            if carry is not None:
                span = carry.merge(span)
                carry = None

            if span.length >= min_size:
                merged.append(span)
                continue

            if merged and merged[-1].merge(span).length <= max_size:
                merged[-1] = merged[-1].merge(span)
            elif i < last_index:
                carry = span
            elif merged:
                merged[-1] = merged[-1].merge(span)
            else:
                merged.append(span)

        if len(merged) != len(spans):
            logger.debug(f"Merged {len(spans) - len(merged)} runt spans below {min_size} characters")
        return merged

    def _inject_overlap(self, text: str, spans: list[TextSpan]) -> list[TextSpan]:
        """Start every span after the first ``chunk_overlap`` characters earlier."""
        overlap = self._config.chunk_overlap
        result: list[TextSpan] = spans[:1]

        for previous, span in zip(spans, spans[1:]):
            start = max(previous.start, span.start - overlap)
            if self._config.keep_separator and start < span.start:
                start = ChunkingStrategy.find_word_boundary(text, start, lower_bound=previous.start)
            result.append(span.with_bounds(min(start, span.start), span.end))

        return result

    def _split_oversize(self, spans: list[TextSpan]) -> list[TextSpan]:
        """
        Slice spans longer than ``max_chunk_size`` into balanced raw pieces.

        Using ``ceil(length / max)`` equal pieces keeps each of them at least
        ``max_chunk_size // 2`` long.
        """
        max_size = self._config.max_chunk_size
        result: list[TextSpan] = []

        for span in spans:
            if span.length <= max_size:
                result.append(span)
                continue

            count = -(-span.length // max_size)
            base, extra = divmod(span.length, count)
            position = span.start
            for i in range(count):
                size = base + 1 if i < extra else base
                result.append(span.with_bounds(position, position + size))
                position += size
            logger.debug(f"Hard split span of {span.length} characters into {count} pieces")

        return result

    def _build_chunks(
        self,
        text: str,
        spans: list[TextSpan],
        strategy_name: str,
        metadata: dict[str, Any],
    ) -> list[DocumentChunk]:
        """Assemble chunk entities with offsets and overlap accounting."""
        chunks: list[DocumentChunk] = []
        total = len(spans)
        previous_end = 0

        for index, span in enumerate(spans):
            overlap = max(0, min(previous_end, span.end) - span.start) if index > 0 else 0
            content = span.slice(text)

            chunk_metadata: dict[str, Any] = dict(metadata)
            chunk_metadata.update(
                {
                    "start_char": span.start,
                    "end_char": span.end,
                    "overlap": overlap,
                    "chunk_size": len(content),
                    "strategy": strategy_name,
                }
            )
            if span.heading:
                chunk_metadata["section_heading"] = span.heading

            chunks.append(
                DocumentChunk(
                    id=f"{strategy_name}_{index:04d}",
                    content=content,
                    index=index,
                    total_chunks=total,
                    metadata=chunk_metadata,
                )
            )
            previous_end = max(previous_end, span.end)

        return chunks
