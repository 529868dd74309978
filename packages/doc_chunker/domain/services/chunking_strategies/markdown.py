#!/usr/bin/env python3
"""
Markdown-aware segmentation strategy.

Headings act as hard boundaries: each section runs from a heading line to the
next heading and is kept together with its heading. Sections whose body is too
large are segmented further with the semantic strategy, and every resulting
span remembers the heading that owns it.
"""

import logging
import re
from dataclasses import dataclass

from doc_chunker.domain.services.chunking_strategies.base import ChunkingStrategy
from doc_chunker.domain.services.chunking_strategies.semantic import SemanticChunkingStrategy
from doc_chunker.domain.value_objects.chunk_config import ChunkConfig
from doc_chunker.domain.value_objects.text_span import TextSpan

logger = logging.getLogger(__name__)

HEADING = re.compile(r"#{1,6}(?:[ \t]|$)")
CODE_FENCE = re.compile(r"[ ]{0,3}(`{3,}|~{3,})")


@dataclass(frozen=True)
class MarkdownSection:
    """A heading (possibly absent for the preamble) and the body that follows it."""

    heading: str | None
    start: int
    body_start: int
    end: int

    @property
    def body_length(self) -> int:
        return self.end - self.body_start


class MarkdownChunkingStrategy(ChunkingStrategy):
    """Structure-preserving strategy for markdown documents."""

    def __init__(self, config: ChunkConfig) -> None:
        """Initialize the markdown strategy."""
        super().__init__("markdown", config)
        self._semantic = SemanticChunkingStrategy(config)

    def segment_range(self, text: str, start: int, end: int) -> list[TextSpan]:
        spans: list[TextSpan] = []
        for section in self.parse_sections(text, start, end):
            if section.body_length <= self._config.chunk_size:
                spans.append(TextSpan(section.start, section.end, section.heading))
                continue

            pieces = self._semantic.segment_range(text, section.body_start, section.end)
            logger.debug(f"Section {section.heading!r} split into {len(pieces)} pieces")
            for i, piece in enumerate(pieces):
                # The heading line travels with the first piece of its body
                piece_start = section.start if i == 0 else piece.start
                spans.append(TextSpan(piece_start, piece.end, section.heading))
        return spans

    @staticmethod
    def parse_sections(text: str, start: int, end: int) -> list[MarkdownSection]:
        """
        Parse a region into heading-delimited sections.

        Heading-like lines inside fenced code blocks are ignored.

        Args:
            text: Full source text
            start: Region start offset
            end: Region end offset

        Returns:
            Sections covering the region in order
        """
        sections: list[MarkdownSection] = []
        heading: str | None = None
        section_start = start
        body_start = start
        open_fence: str | None = None

        offset = start
        for line in text[start:end].splitlines(keepends=True):
            line_start = offset
            offset += len(line)

            fence = CODE_FENCE.match(line)
            if fence:
                marker = fence.group(1)
                if open_fence is None:
                    open_fence = marker
                elif marker[0] == open_fence[0] and len(marker) >= len(open_fence):
                    # Only a fence of the same kind and at least the same length closes the block
                    open_fence = None
                continue
            if open_fence is not None or not HEADING.match(line):
                continue

            if line_start > section_start:
                sections.append(MarkdownSection(heading, section_start, body_start, line_start))
            heading = line.strip()
            section_start = line_start
            body_start = offset

        if section_start < end:
            sections.append(MarkdownSection(heading, section_start, body_start, end))
        return sections
