#!/usr/bin/env python3
"""
Segmentation strategies for different text processing approaches.

Each strategy implements a specific algorithm for choosing split points.
"""

from doc_chunker.domain.services.chunking_strategies.base import ChunkingStrategy
from doc_chunker.domain.services.chunking_strategies.fixed import FixedSizeChunkingStrategy
from doc_chunker.domain.services.chunking_strategies.markdown import MarkdownChunkingStrategy
from doc_chunker.domain.services.chunking_strategies.recursive import RecursiveChunkingStrategy
from doc_chunker.domain.services.chunking_strategies.semantic import SemanticChunkingStrategy
from doc_chunker.domain.services.chunking_strategies.sentence import SentenceChunkingStrategy

__all__ = [
    "ChunkingStrategy",
    "FixedSizeChunkingStrategy",
    "MarkdownChunkingStrategy",
    "RecursiveChunkingStrategy",
    "SemanticChunkingStrategy",
    "SentenceChunkingStrategy",
]
