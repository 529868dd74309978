#!/usr/bin/env python3
"""
Abstract base class for all segmentation strategies.

This module defines the interface that all strategies must implement. A
strategy only chooses split points: it returns ordered raw spans covering the
text and leaves size bounds and overlap to the post-processor.
"""

import logging
from abc import ABC, abstractmethod

from doc_chunker.domain.value_objects.chunk_config import ChunkConfig
from doc_chunker.domain.value_objects.text_span import TextSpan

logger = logging.getLogger(__name__)


class ChunkingStrategy(ABC):
    """
    Abstract base class for all segmentation strategies.

    Strategies hold nothing but their immutable configuration, so one
    instance can serve concurrent calls on independent inputs.
    """

    #: Whether the strategy emits overlapping spans itself
    applies_overlap: bool = False

    def __init__(self, name: str, config: ChunkConfig) -> None:
        """
        Initialize the strategy.

        Args:
            name: The name of the strategy
            config: Validated chunking configuration
        """
        self._name = name
        self._config = config

    @property
    def name(self) -> str:
        """Get the strategy name."""
        return self._name

    @property
    def config(self) -> ChunkConfig:
        return self._config

    def segment(self, text: str) -> list[TextSpan]:
        """
        Split text into ordered raw spans.

        Args:
            text: The text content to segment

        Returns:
            Spans covering the text in order; empty for blank input
        """
        if not text or not text.strip():
            return []

        spans = self.segment_range(text, 0, len(text))
        logger.debug(f"{self._name} strategy produced {len(spans)} spans for {len(text)} characters")
        return spans

    @abstractmethod
    def segment_range(self, text: str, start: int, end: int) -> list[TextSpan]:
        """
        Segment the ``[start, end)`` region of ``text``.

        Working on a region of the full document keeps every span in
        source coordinates when strategies delegate to one another.

        Args:
            text: Full source text
            start: Region start offset
            end: Region end offset

        Returns:
            Disjoint spans covering the region in order
        """

    @staticmethod
    def find_word_boundary(text: str, target_position: int, lower_bound: int = 0) -> int:
        """
        Find the nearest word boundary at or before a target position.

        Args:
            text: The text to search in
            target_position: Target character position
            lower_bound: Do not search before this position

        Returns:
            Position of the boundary, or ``target_position`` if none exists
            between ``lower_bound`` and the target
        """
        if target_position <= lower_bound or target_position >= len(text):
            return target_position

        # Already between whitespace and a token (or between two tokens separated by space)
        if text[target_position - 1].isspace() or text[target_position].isspace():
            return target_position

        for i in range(target_position - 1, lower_bound, -1):
            if text[i - 1].isspace():
                return i
        return target_position

    def __repr__(self) -> str:
        """String representation of the strategy."""
        return f"{self.__class__.__name__}(name='{self._name}')"
