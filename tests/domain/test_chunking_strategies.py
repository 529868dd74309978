#!/usr/bin/env python3
"""Tests for all segmentation strategies."""

import pytest

from doc_chunker.domain.services.chunking_strategies.base import ChunkingStrategy
from doc_chunker.domain.services.chunking_strategies.fixed import FixedSizeChunkingStrategy
from doc_chunker.domain.services.chunking_strategies.markdown import MarkdownChunkingStrategy
from doc_chunker.domain.services.chunking_strategies.recursive import (
    WORD_SEPARATORS,
    RecursiveChunkingStrategy,
)
from doc_chunker.domain.services.chunking_strategies.semantic import SemanticChunkingStrategy
from doc_chunker.domain.services.chunking_strategies.sentence import SentenceChunkingStrategy
from doc_chunker.domain.value_objects.chunk_config import ChunkConfig
from doc_chunker.domain.value_objects.text_span import TextSpan


def assert_contiguous(spans: list[TextSpan], text: str) -> None:
    """Spans must cover the text in order without gaps or overlaps."""
    assert spans[0].start == 0
    assert spans[-1].end == len(text)
    for previous, span in zip(spans, spans[1:]):
        assert span.start == previous.end


class TestFixedSizeChunkingStrategy:
    """Test suite for FixedSizeChunkingStrategy."""

    @pytest.fixture()
    def strategy(self):
        """Create a fixed-size strategy with a 10 character window and 3 characters of overlap."""
        return FixedSizeChunkingStrategy(ChunkConfig(chunk_size=10, chunk_overlap=3, strategy="fixed"))

    def test_sliding_window(self, strategy):
        """Test that windows advance by chunk_size - chunk_overlap."""
        # Arrange
        text = "abcdefghijklmnopqrstuvwxyz"

        # Act
        spans = strategy.segment(text)

        # Assert
        assert spans == [TextSpan(0, 10), TextSpan(7, 17), TextSpan(14, 24), TextSpan(21, 26)]

    def test_text_equal_to_window(self, strategy):
        assert strategy.segment("a" * 10) == [TextSpan(0, 10)]

    def test_text_shorter_than_window(self, strategy):
        assert strategy.segment("short") == [TextSpan(0, 5)]

    @pytest.mark.parametrize(("length", "expected"), [(0, 0), (5, 1), (10, 1), (11, 2), (26, 4)])
    def test_estimate_chunks(self, strategy, length, expected):
        """Test the window count formula against the produced spans."""
        assert strategy.estimate_chunks(length) == expected
        if length:
            assert len(strategy.segment("x" * length)) == expected

    def test_applies_overlap_natively(self, strategy):
        assert strategy.applies_overlap is True
        assert strategy.name == "fixed"


class TestRecursiveChunkingStrategy:
    """Test suite for RecursiveChunkingStrategy."""

    @pytest.fixture()
    def strategy(self):
        """Create a recursive strategy with a small target size."""
        return RecursiveChunkingStrategy(ChunkConfig(chunk_size=12))

    def test_paragraphs_then_words(self, strategy):
        """Test that coarse separators are tried before finer ones."""
        # Arrange
        text = "para one\n\npara two\n\npara three is longer"

        # Act
        spans = strategy.segment(text)

        # Assert
        assert spans == [TextSpan(0, 10), TextSpan(10, 20), TextSpan(20, 31), TextSpan(31, 40)]
        assert_contiguous(spans, text)

    def test_separator_stays_with_preceding_piece(self, strategy):
        text = "para one\n\npara two\n\npara three is longer"

        spans = strategy.segment(text)

        assert spans[0].slice(text) == "para one\n\n"
        assert spans[2].slice(text) == "para three "

    def test_character_fallback(self, strategy):
        """Test that text without separators is cut into raw windows."""
        text = "x" * 30

        spans = strategy.segment(text)

        assert spans == [TextSpan(0, 12), TextSpan(12, 24), TextSpan(24, 30)]

    def test_small_text_single_span(self, strategy):
        assert strategy.segment("tiny text") == [TextSpan(0, 9)]

    def test_custom_separators(self):
        """Test that a custom hierarchy is completed with the character fallback."""
        # Arrange
        strategy = RecursiveChunkingStrategy(ChunkConfig(chunk_size=3), separators=("|",))
        text = "aa|bb|cc"

        # Act
        spans = strategy.segment(text)

        # Assert
        assert strategy.separators == ("|", "")
        assert spans == [TextSpan(0, 3), TextSpan(3, 6), TextSpan(6, 8)]

    def test_split_region_keeps_source_offsets(self, strategy):
        """Test that splitting a region reports offsets into the full text."""
        text = "HEADER----" + "one two three four five"

        spans = strategy.split_region(text, 10, len(text), WORD_SEPARATORS)

        assert spans[0].start == 10
        assert spans[-1].end == len(text)
        assert all(span.length <= 12 for span in spans)

    def test_prose(self, strategy, prose_text):
        spans = strategy.segment(prose_text)

        assert_contiguous(spans, prose_text)
        assert all(span.length <= 12 for span in spans)


class TestSemanticChunkingStrategy:
    """Test suite for SemanticChunkingStrategy."""

    @pytest.fixture()
    def strategy(self):
        """Create a semantic strategy with chunk size 30 and hard bound 60."""
        return SemanticChunkingStrategy(ChunkConfig(chunk_size=30))

    def test_groups_short_paragraphs(self, strategy):
        """Test that short paragraphs are grouped and a medium one stays whole."""
        # Arrange
        text = "Short one.\n\nShort two.\n\n" + "word " * 8

        # Act
        spans = strategy.segment(text)

        # Assert
        assert spans == [TextSpan(0, 24), TextSpan(24, 64)]

    def test_huge_paragraph_uses_recursive_fallback(self, strategy):
        """Test that a paragraph above max_chunk_size is split recursively."""
        # Arrange
        text = "intro\n\n" + "word " * 20

        # Act
        spans = strategy.segment(text)

        # Assert
        assert spans == [
            TextSpan(0, 7),
            TextSpan(7, 37),
            TextSpan(37, 67),
            TextSpan(67, 97),
            TextSpan(97, 107),
        ]

    def test_split_paragraphs(self):
        """Test that runs of blank lines belong to the break and indentation to the next paragraph."""
        text = "a\n\n \n  b"

        paragraphs = SemanticChunkingStrategy.split_paragraphs(text, 0, len(text))

        assert paragraphs == [TextSpan(0, 5), TextSpan(5, 8)]
        assert paragraphs[1].slice(text) == "  b"

    def test_indented_block_keeps_leading_whitespace(self):
        """Test that an indented paragraph starts with its own indentation."""
        # Arrange
        strategy = SemanticChunkingStrategy(ChunkConfig(chunk_size=20))
        text = "First paragraph.\n\n    indented code line"

        # Act
        spans = strategy.segment(text)

        # Assert
        assert [span.slice(text) for span in spans] == ["First paragraph.\n\n", "    indented code line"]

    def test_no_paragraph_breaks(self, strategy):
        assert strategy.segment("one line only") == [TextSpan(0, 13)]


class TestSentenceChunkingStrategy:
    """Test suite for SentenceChunkingStrategy."""

    @pytest.fixture()
    def strategy(self):
        """Create a sentence strategy with chunk size 30."""
        return SentenceChunkingStrategy(ChunkConfig(chunk_size=30))

    def test_split_sentences_with_abbreviation(self):
        """Test that common abbreviations do not end sentences."""
        # Arrange
        text = "Dr. Smith arrived. He sat down! Was it late? Yes"

        # Act
        sentences = SentenceChunkingStrategy.split_sentences(text, 0, len(text))

        # Assert
        assert [s.slice(text) for s in sentences] == [
            "Dr. Smith arrived. ",
            "He sat down! ",
            "Was it late? ",
            "Yes",
        ]

    def test_split_sentences_with_initials(self):
        text = "J. R. R. Tolkien wrote books. The end."

        sentences = SentenceChunkingStrategy.split_sentences(text, 0, len(text))

        assert [s.slice(text) for s in sentences] == ["J. R. R. Tolkien wrote books. ", "The end."]

    def test_split_sentences_closing_quotes_and_decimals(self):
        """Test that closing quotes stay with their sentence and decimals do not split."""
        text = 'He said "Stop!" Then pi was 3.14 exactly.'

        sentences = SentenceChunkingStrategy.split_sentences(text, 0, len(text))

        assert [s.slice(text) for s in sentences] == ['He said "Stop!" ', "Then pi was 3.14 exactly."]

    def test_accumulates_sentences(self, strategy):
        """Test that sentences are grouped up to chunk_size."""
        # Arrange
        text = "One two three. Four five six. Seven eight nine. Ten."

        # Act
        spans = strategy.segment(text)

        # Assert
        assert [span.slice(text) for span in spans] == [
            "One two three. Four five six. ",
            "Seven eight nine. Ten.",
        ]

    def test_long_sentence_split_on_words(self):
        """Test that a sentence above max_chunk_size is sliced on word boundaries."""
        # Arrange
        strategy = SentenceChunkingStrategy(ChunkConfig(chunk_size=10))
        text = "word " * 10

        # Act
        spans = strategy.segment(text)

        # Assert
        assert [span.slice(text) for span in spans] == ["word word "] * 5


class TestMarkdownChunkingStrategy:
    """Test suite for MarkdownChunkingStrategy."""

    @pytest.fixture()
    def strategy(self):
        """Create a markdown strategy with chunk size 60."""
        return MarkdownChunkingStrategy(ChunkConfig(chunk_size=60))

    def test_parse_sections(self, markdown_text):
        """Test heading detection, ignoring headings inside code fences."""
        # Act
        sections = MarkdownChunkingStrategy.parse_sections(markdown_text, 0, len(markdown_text))

        # Assert
        assert [s.heading for s in sections] == [None, "# Introduction", "## Details", "### Summary"]
        assert sections[0].start == 0
        assert sections[-1].end == len(markdown_text)
        for section in sections[1:]:
            assert markdown_text[section.start : section.body_start].strip() == section.heading

    def test_mixed_fence_markers(self):
        """Test that a fence only closes on the marker kind that opened it."""
        # Arrange
        text = "```\n~~~\n# inside code\n```\n# Real\nbody\n~~~~\n# tilde code\n~~~\n~~~~\n## After\n"

        # Act
        sections = MarkdownChunkingStrategy.parse_sections(text, 0, len(text))

        # Assert
        assert [s.heading for s in sections] == [None, "# Real", "## After"]

    def test_heading_requires_space(self):
        text = "#hashtag line\n# Real\nbody"

        sections = MarkdownChunkingStrategy.parse_sections(text, 0, len(text))

        assert [s.heading for s in sections] == [None, "# Real"]

    def test_small_document_single_section(self, strategy):
        """Test that a section fitting the chunk size stays whole with its heading."""
        text = "# Title\n\nBody paragraph."

        spans = strategy.segment(text)

        assert spans == [TextSpan(0, len(text), "# Title")]

    def test_large_section_spans_carry_heading(self, strategy, markdown_text):
        """Test that every piece of a split section remembers its heading."""
        # Act
        spans = strategy.segment(markdown_text)

        # Assert
        assert_contiguous(spans, markdown_text)
        details = [span for span in spans if span.heading == "## Details"]
        assert len(details) >= 2
        assert details[0].slice(markdown_text).startswith("## Details")
        assert all(span.heading != "# not a heading inside code" for span in spans)
        assert spans[0].heading is None
        assert spans[-1].slice(markdown_text).startswith("### Summary")


class TestChunkingStrategyBase:
    """Test suite for shared strategy behaviour."""

    @pytest.mark.parametrize(
        "strategy_cls",
        [
            FixedSizeChunkingStrategy,
            RecursiveChunkingStrategy,
            SemanticChunkingStrategy,
            SentenceChunkingStrategy,
            MarkdownChunkingStrategy,
        ],
    )
    @pytest.mark.parametrize("text", ["", "   ", "\n\n\t"])
    def test_blank_text_yields_no_spans(self, strategy_cls, text):
        strategy = strategy_cls(ChunkConfig(chunk_size=10))

        assert strategy.segment(text) == []

    @pytest.mark.parametrize(
        ("target", "lower_bound", "expected"),
        [
            (8, 0, 6),  # inside "world" -> start of "world"
            (6, 0, 6),  # already at a boundary
            (5, 0, 5),  # on the space itself
            (8, 6, 8),  # no boundary above the lower bound
            (0, 0, 0),
            (15, 0, 15),  # end of text
        ],
    )
    def test_find_word_boundary(self, target, lower_bound, expected):
        assert ChunkingStrategy.find_word_boundary("hello world foo", target, lower_bound) == expected

    def test_repr(self):
        strategy = RecursiveChunkingStrategy(ChunkConfig(chunk_size=10))

        assert repr(strategy) == "RecursiveChunkingStrategy(name='recursive')"
