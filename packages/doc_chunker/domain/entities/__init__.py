#!/usr/bin/env python3
"""
Domain entities for chunking operations.
"""

from doc_chunker.domain.entities.chunking_result import ChunkingResult
from doc_chunker.domain.entities.document_chunk import DocumentChunk

__all__ = ["ChunkingResult", "DocumentChunk"]
