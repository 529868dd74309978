#!/usr/bin/env python3
"""
Document chunking engine.

Splits text documents into bounded, possibly overlapping chunks for
downstream indexing, using one of five segmentation strategies.
"""

from doc_chunker.chunker import DocumentChunker, chunk_text, create_chunker
from doc_chunker.domain.entities.chunking_result import ChunkingResult
from doc_chunker.domain.entities.document_chunk import DocumentChunk
from doc_chunker.domain.exceptions import (
    ChunkingDomainError,
    ConfigurationError,
    OverlapConfigurationError,
    UnsupportedStrategyError,
)
from doc_chunker.domain.value_objects.chunk_config import ChunkConfig
from doc_chunker.domain.value_objects.chunking_stats import ChunkingStats
from doc_chunker.domain.value_objects.strategy_type import StrategyType
from doc_chunker.version import __version__

__all__ = [
    "ChunkConfig",
    "ChunkingDomainError",
    "ChunkingResult",
    "ChunkingStats",
    "ConfigurationError",
    "DocumentChunk",
    "DocumentChunker",
    "OverlapConfigurationError",
    "StrategyType",
    "UnsupportedStrategyError",
    "__version__",
    "chunk_text",
    "create_chunker",
]
