#!/usr/bin/env python3
"""
Sentence-based segmentation strategy.

Chunk boundaries always fall between sentences, except for a single sentence
longer than ``max_chunk_size``, which is sliced on word boundaries.
"""

import logging
import re

from doc_chunker.domain.services.chunking_strategies.base import ChunkingStrategy
from doc_chunker.domain.services.chunking_strategies.recursive import (
    WORD_SEPARATORS,
    RecursiveChunkingStrategy,
)
from doc_chunker.domain.value_objects.chunk_config import ChunkConfig
from doc_chunker.domain.value_objects.text_span import TextSpan

logger = logging.getLogger(__name__)

# Terminal punctuation, optional closing quotes/brackets, then whitespace or end of text
SENTENCE_END = re.compile(r"[.!?]+[\"'”’)\]]*(?:\s+|$)")

# Lower-cased tokens that end with a period without ending a sentence
ABBREVIATIONS = frozenset(
    {
        "mr", "mrs", "ms", "dr", "prof", "sr", "jr", "st", "mt", "vs", "etc",
        "e.g", "i.e", "cf", "al", "inc", "ltd", "co", "corp", "dept", "no",
        "fig", "approx", "est", "gen", "gov", "rev", "sgt", "capt", "col",
        "jan", "feb", "mar", "apr", "jun", "jul", "aug", "sep", "sept", "oct", "nov", "dec",
    }
)


class SentenceChunkingStrategy(ChunkingStrategy):
    """Accumulates whole sentences into spans of at most ``chunk_size``."""

    def __init__(self, config: ChunkConfig) -> None:
        """Initialize the sentence strategy."""
        super().__init__("sentence", config)
        self._fallback = RecursiveChunkingStrategy(config)

    def segment_range(self, text: str, start: int, end: int) -> list[TextSpan]:
        chunk_size = self._config.chunk_size
        max_size = self._config.max_chunk_size

        spans: list[TextSpan] = []
        current: TextSpan | None = None

        for sentence in self.split_sentences(text, start, end):
            if sentence.length > max_size:
                if current is not None:
                    spans.append(current)
                    current = None
                spans.extend(self._fallback.split_region(text, sentence.start, sentence.end, WORD_SEPARATORS))
            elif current is None:
                current = sentence
            elif current.length + sentence.length <= chunk_size:
                current = current.merge(sentence)
            else:
                spans.append(current)
                current = sentence

        if current is not None:
            spans.append(current)
        return spans

    @classmethod
    def split_sentences(cls, text: str, start: int, end: int) -> list[TextSpan]:
        """
        Tokenize a region into sentences.

        Args:
            text: Full source text
            start: Region start offset
            end: Region end offset

        Returns:
            Sentence spans including their trailing whitespace; text without
            terminal punctuation forms a single sentence
        """
        sentences: list[TextSpan] = []
        position = start
        for match in SENTENCE_END.finditer(text, start, end):
            if match.end() <= position:
                continue
            if cls._is_abbreviation(text, position, match.start(), match.group()):
                continue
            sentences.append(TextSpan(position, match.end()))
            position = match.end()
        if position < end:
            sentences.append(TextSpan(position, end))
        return sentences

    @staticmethod
    def _is_abbreviation(text: str, sentence_start: int, punct_start: int, terminator: str) -> bool:
        """Check whether a period closes an abbreviation or an initial rather than a sentence."""
        if not terminator.startswith(".") or terminator.rstrip().rstrip("\"'”’)]") != ".":
            return False

        token_start = punct_start
        while token_start > sentence_start and not text[token_start - 1].isspace():
            token_start -= 1
        token = text[token_start:punct_start].lstrip("\"'(“‘[").lower()

        if token in ABBREVIATIONS:
            return True
        # Single-letter initials such as "J. R. R. Tolkien"
        return len(token) == 1 and token.isalpha()
