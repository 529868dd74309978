#!/usr/bin/env python3
"""
Semantic segmentation strategy.

Paragraphs are treated as the smallest semantic unit: consecutive short
paragraphs are grouped together, and only a paragraph that is too large to
stand on its own is broken down further.
"""

import logging
import re

from doc_chunker.domain.services.chunking_strategies.base import ChunkingStrategy
from doc_chunker.domain.services.chunking_strategies.recursive import RecursiveChunkingStrategy
from doc_chunker.domain.value_objects.chunk_config import ChunkConfig
from doc_chunker.domain.value_objects.text_span import TextSpan

logger = logging.getLogger(__name__)

# One or more blank lines; indentation of the next line stays with the next paragraph
PARAGRAPH_BREAK = re.compile(r"\n[ \t]*\n(?:[ \t]*\n)*")


class SemanticChunkingStrategy(ChunkingStrategy):
    """Paragraph-grouping strategy with a recursive fallback for huge paragraphs."""

    def __init__(self, config: ChunkConfig) -> None:
        """Initialize the semantic strategy."""
        super().__init__("semantic", config)
        self._fallback = RecursiveChunkingStrategy(config)

    def segment_range(self, text: str, start: int, end: int) -> list[TextSpan]:
        chunk_size = self._config.chunk_size
        max_size = self._config.max_chunk_size

        spans: list[TextSpan] = []
        current: TextSpan | None = None

        for paragraph in self.split_paragraphs(text, start, end):
            if paragraph.length > max_size:
                if current is not None:
                    spans.append(current)
                    current = None
                pieces = self._fallback.split_region(text, paragraph.start, paragraph.end)
                logger.debug(f"Paragraph of {paragraph.length} characters split into {len(pieces)} pieces")
                spans.extend(pieces)
            elif paragraph.length > chunk_size:
                # Oversized but within the hard bound: keep the paragraph whole
                if current is not None:
                    spans.append(current)
                    current = None
                spans.append(paragraph)
            elif current is None:
                current = paragraph
            elif current.length + paragraph.length <= chunk_size:
                current = current.merge(paragraph)
            else:
                spans.append(current)
                current = paragraph

        if current is not None:
            spans.append(current)
        return spans

    @staticmethod
    def split_paragraphs(text: str, start: int, end: int) -> list[TextSpan]:
        """
        Split a region on blank-line paragraph boundaries.

        Args:
            text: Full source text
            start: Region start offset
            end: Region end offset

        Returns:
            Paragraph spans, each including the break that follows it
        """
        paragraphs: list[TextSpan] = []
        position = start
        for match in PARAGRAPH_BREAK.finditer(text, start, end):
            if match.end() <= position:
                continue
            paragraphs.append(TextSpan(position, match.end()))
            position = match.end()
        if position < end:
            paragraphs.append(TextSpan(position, end))
        return paragraphs
