#!/usr/bin/env python3
"""
Recursive text segmentation strategy.

This strategy recursively splits text using a hierarchy of separators,
preferring natural document boundaries like paragraphs, sentences, and words.
It is the general-purpose default and the fallback used by the semantic,
markdown and sentence strategies for regions that are too large.
"""

import logging

from doc_chunker.domain.services.chunking_strategies.base import ChunkingStrategy
from doc_chunker.domain.value_objects.chunk_config import ChunkConfig
from doc_chunker.domain.value_objects.text_span import TextSpan

logger = logging.getLogger(__name__)

# Separator hierarchy (from most to least preferred)
DEFAULT_SEPARATORS: tuple[str, ...] = (
    "\n\n",  # Paragraph breaks
    "\n",  # Line breaks
    ". ",  # Sentences
    "! ",  # Exclamation sentences
    "? ",  # Question sentences
    "; ",  # Semicolon clauses
    ": ",  # Colon clauses
    ", ",  # Comma clauses
    " ",  # Words
    "",  # Characters (last resort)
)

WORD_SEPARATORS: tuple[str, ...] = (" ", "\n", "\t", "")


class RecursiveChunkingStrategy(ChunkingStrategy):
    """
    Recursive segmentation over a separator hierarchy.

    The coarsest separator present in a region is used first; pieces that
    still exceed ``chunk_size`` are re-split with the separators below it, and
    consecutive small pieces are merged back up to ``chunk_size``. A separator
    stays attached to the end of the piece that precedes it.
    """

    def __init__(self, config: ChunkConfig, separators: tuple[str, ...] = DEFAULT_SEPARATORS) -> None:
        """
        Initialize the recursive strategy.

        Args:
            config: Chunking configuration
            separators: Separator hierarchy; must end with ``""``
        """
        super().__init__("recursive", config)
        if not separators or separators[-1] != "":
            separators = (*separators, "")
        self.separators = separators

    def segment_range(self, text: str, start: int, end: int) -> list[TextSpan]:
        return self.split_region(text, start, end)

    def split_region(
        self,
        text: str,
        start: int,
        end: int,
        separators: tuple[str, ...] | None = None,
        max_size: int | None = None,
    ) -> list[TextSpan]:
        """
        Recursively split a region of the text.

        Args:
            text: Full source text
            start: Region start offset
            end: Region end offset
            separators: Separator hierarchy to use, defaults to the strategy's own
            max_size: Target piece size, defaults to ``chunk_size``

        Returns:
            Spans covering the region, each at most ``max_size`` long
        """
        if end <= start:
            return []
        separators = separators if separators is not None else self.separators
        max_size = max_size or self._config.chunk_size
        return self._recursive_split(text, start, end, separators, max_size)

    def _recursive_split(
        self,
        text: str,
        start: int,
        end: int,
        separators: tuple[str, ...],
        max_size: int,
    ) -> list[TextSpan]:
        # Base case: region is within size limits
        if end - start <= max_size:
            return [TextSpan(start, end)]

        separator, remaining = self._pick_separator(text, start, end, separators)
        if not separator:
            return self._slice_characters(start, end, max_size)

        result: list[TextSpan] = []
        pending: list[TextSpan] = []
        for piece in self._split_keeping_separator(text, start, end, separator):
            if piece.length <= max_size:
                pending.append(piece)
                continue

            result.extend(self._merge_pieces(pending, max_size))
            pending = []
            # Recursively split with remaining separators
            result.extend(self._recursive_split(text, piece.start, piece.end, remaining, max_size))

        result.extend(self._merge_pieces(pending, max_size))
        return result

    @staticmethod
    def _pick_separator(
        text: str,
        start: int,
        end: int,
        separators: tuple[str, ...],
    ) -> tuple[str, tuple[str, ...]]:
        """Return the coarsest separator occurring in the region and the ones below it."""
        for i, separator in enumerate(separators):
            if separator == "":
                return "", ()
            if text.find(separator, start, end) != -1:
                return separator, separators[i + 1 :]
        return "", ()

    @staticmethod
    def _split_keeping_separator(text: str, start: int, end: int, separator: str) -> list[TextSpan]:
        """Split a region after every separator occurrence."""
        pieces: list[TextSpan] = []
        position = start
        while position < end:
            index = text.find(separator, position, end)
            if index == -1:
                pieces.append(TextSpan(position, end))
                break
            piece_end = index + len(separator)
            pieces.append(TextSpan(position, piece_end))
            position = piece_end
        return pieces

    @staticmethod
    def _merge_pieces(pieces: list[TextSpan], max_size: int) -> list[TextSpan]:
        """Greedily merge consecutive pieces while the result stays within max_size."""
        merged: list[TextSpan] = []
        current: TextSpan | None = None
        for piece in pieces:
            if current is None:
                current = piece
            elif current.length + piece.length <= max_size:
                current = current.merge(piece)
            else:
                merged.append(current)
                current = piece
        if current is not None:
            merged.append(current)
        return merged

    @staticmethod
    def _slice_characters(start: int, end: int, max_size: int) -> list[TextSpan]:
        """Last resort: cut the region into raw character windows."""
        return [TextSpan(i, min(i + max_size, end)) for i in range(start, end, max_size)]
