#!/usr/bin/env python3
"""
Pure domain layer for chunking operations.

This module provides the core business logic for text chunking,
completely independent of any infrastructure concerns.
"""

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
from doc_chunker.domain.value_objects.text_span import TextSpan

__all__ = [
    # Entities
    "ChunkingResult",
    "DocumentChunk",
    # Value Objects
    "ChunkConfig",
    "ChunkingStats",
    "StrategyType",
    "TextSpan",
    # Exceptions
    "ChunkingDomainError",
    "ConfigurationError",
    "OverlapConfigurationError",
    "UnsupportedStrategyError",
]
