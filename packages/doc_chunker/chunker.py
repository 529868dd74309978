#!/usr/bin/env python3
"""
Document chunking engine.

Facade over the domain layer: resolves the configured strategy once, then
turns text into a ChunkingResult through segmentation and post-processing.
The engine performs no I/O and keeps no mutable state between calls, so a
single instance may be shared across threads.
"""

import logging
import time
from collections.abc import Iterable, Mapping
from typing import Any

from doc_chunker.domain.entities.chunking_result import ChunkingResult
from doc_chunker.domain.entities.document_chunk import DocumentChunk
from doc_chunker.domain.services.post_processor import BoundaryPostProcessor
from doc_chunker.domain.services.statistics import compute_stats
from doc_chunker.domain.services.strategy_factory import ChunkingStrategyFactory
from doc_chunker.domain.value_objects.chunk_config import ChunkConfig
from doc_chunker.domain.value_objects.chunking_stats import ChunkingStats
from doc_chunker.domain.value_objects.strategy_type import StrategyType

logger = logging.getLogger(__name__)

BatchDocument = str | tuple[str, Mapping[str, Any] | None] | Mapping[str, Any]


class DocumentChunker:
    """
    Chunks documents with a fixed configuration.

    Example:
        chunker = DocumentChunker(ChunkConfig(chunk_size=100, chunk_overlap=20, strategy="fixed"))
        result = chunker.chunk(text, {"source": "notes.md"})
        stats = chunker.get_stats(result)
    """

    def __init__(self, config: ChunkConfig | None = None) -> None:
        """
        Initialize the engine.

        Args:
            config: Chunking configuration, defaults to the settings-driven config

        Raises:
            ConfigurationError: If the default configuration is invalid
            UnsupportedStrategyError: If the configured strategy is unknown
        """
        self._config = config if config is not None else ChunkConfig.from_settings()
        self._strategy = ChunkingStrategyFactory.create_strategy(self._config)
        self._post_processor = BoundaryPostProcessor(self._config)

    @property
    def config(self) -> ChunkConfig:
        """Get the immutable configuration."""
        return self._config

    def with_config(self, **changes: Any) -> "DocumentChunker":
        """
        Return a new engine whose configuration has some fields replaced.

        Args:
            **changes: ChunkConfig fields to override

        Returns:
            New engine; this one is left untouched
        """
        return DocumentChunker(self._config.with_updates(**changes))

    def chunk(self, text: str, metadata: Mapping[str, Any] | None = None) -> ChunkingResult:
        """
        Chunk a document with the configured strategy.

        Args:
            text: Source text; empty or whitespace-only text yields no chunks
            metadata: Caller metadata carried into the result and every chunk

        Returns:
            Ordered chunks with offsets into ``text``
        """
        start_time = time.perf_counter()
        source_metadata = dict(metadata or {})

        spans = self._strategy.segment(text or "")
        chunks = self._post_processor.process(text or "", spans, self._strategy, source_metadata)

        processing_time_ms = (time.perf_counter() - start_time) * 1000
        logger.debug(
            f"Chunked {len(text or '')} characters into {len(chunks)} chunks "
            f"with {self._strategy.name} strategy in {processing_time_ms:.2f}ms"
        )

        return ChunkingResult(
            chunks=tuple(chunks),
            strategy=self._strategy.name,
            processing_time_ms=processing_time_ms,
            metadata=source_metadata,
        )

    def batch_chunk(self, documents: Iterable[BatchDocument]) -> list[ChunkingResult]:
        """
        Chunk several documents with the same configuration.

        Args:
            documents: Plain strings, ``(text, metadata)`` pairs, or mappings
                with ``text`` and optional ``metadata`` keys

        Returns:
            One result per document, in input order
        """
        results = []
        for document in documents:
            if isinstance(document, str):
                text, metadata = document, None
            elif isinstance(document, Mapping):
                text, metadata = document.get("text", ""), document.get("metadata")
            else:
                text, metadata = document
            results.append(self.chunk(text, metadata))
        return results

    def get_stats(self, result: ChunkingResult) -> ChunkingStats:
        """
        Get chunking statistics for a result.

        Args:
            result: Result returned by ``chunk``

        Returns:
            Observed statistics
        """
        return compute_stats(result)


def create_chunker(
    strategy: StrategyType | str = StrategyType.RECURSIVE,
    chunk_size: int = 500,
    chunk_overlap: int = 50,
) -> DocumentChunker:
    """Create a chunker with default settings for everything but size, overlap and strategy."""
    return DocumentChunker(ChunkConfig(chunk_size=chunk_size, chunk_overlap=chunk_overlap, strategy=strategy))


def chunk_text(
    text: str,
    chunk_size: int = 500,
    chunk_overlap: int = 50,
    strategy: StrategyType | str = StrategyType.RECURSIVE,
) -> list[DocumentChunk]:
    """Chunk text in one call and return just the chunks."""
    return list(create_chunker(strategy, chunk_size, chunk_overlap).chunk(text).chunks)
