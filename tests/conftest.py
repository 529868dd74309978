"""Shared test configuration and fixtures."""

import os

# Isolate tests from any developer environment BEFORE any app imports
for _key in [key for key in os.environ if key.startswith("CHUNKING_")]:
    del os.environ[_key]

import pytest  # noqa: E402

from doc_chunker.domain.value_objects.chunk_config import ChunkConfig  # noqa: E402
from doc_chunker.domain.value_objects.strategy_type import StrategyType  # noqa: E402

PROSE = (
    "Chunking splits a long document into pieces. Each piece should be small enough to embed. "
    "Overlap keeps context across boundaries! Does it also help retrieval? Usually it does.\n\n"
    "A second paragraph talks about separators; they decide where pieces end: paragraphs first, "
    "then lines, then sentences, then words, and characters only as a last resort.\n\n"
    "The third paragraph is deliberately long so that it cannot fit into a single small chunk "
    "without being split further, which exercises the fallback paths of every strategy. "
    "It keeps going with ordinary sentences, commas, and clauses, so that the recursive splitter "
    "has several separators to choose from before it resorts to cutting words apart.\n"
    "A single line break appears here.\n\n"
    "Short closing paragraph."
)

MARKDOWN = (
    "Preamble text before any heading.\n\n"
    "# Introduction\n\n"
    "The introduction is short.\n\n"
    "## Details\n\n"
    "Details paragraph one explains the approach in plain words and keeps going for a while.\n\n"
    "Details paragraph two adds more context so that the section body exceeds the chunk size.\n\n"
    "```python\n"
    "# not a heading inside code\n"
    "print('hello')\n"
    "```\n\n"
    "### Summary\n"
    "Done.\n"
)


@pytest.fixture(params=[strategy.value for strategy in StrategyType])
def strategy_name(request) -> str:
    """Every available strategy identifier."""
    return request.param


@pytest.fixture()
def prose_text() -> str:
    """Multi-paragraph prose with mixed separators."""
    return PROSE


@pytest.fixture()
def markdown_text() -> str:
    """Markdown document with a preamble, nested headings and a fenced code block."""
    return MARKDOWN


@pytest.fixture()
def small_config() -> ChunkConfig:
    """Small chunk configuration that forces several chunks for the sample texts."""
    return ChunkConfig(chunk_size=80, chunk_overlap=0)


@pytest.fixture()
def config_factory():
    """Build configurations with test-friendly defaults."""

    def _factory(**overrides) -> ChunkConfig:
        params = {"chunk_size": 80, "chunk_overlap": 0}
        params.update(overrides)
        return ChunkConfig(**params)

    return _factory
