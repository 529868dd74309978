#!/usr/bin/env python3
"""
Value objects for chunking domain.

Value objects are immutable objects that represent concepts in the domain
without identity.
"""

from doc_chunker.domain.value_objects.chunk_config import ChunkConfig
from doc_chunker.domain.value_objects.chunking_stats import ChunkingStats
from doc_chunker.domain.value_objects.strategy_type import StrategyType
from doc_chunker.domain.value_objects.text_span import TextSpan

__all__ = ["ChunkConfig", "ChunkingStats", "StrategyType", "TextSpan"]
