#!/usr/bin/env python3

"""Tests for domain exceptions and business rule enforcement."""

import pytest

from doc_chunker.chunker import DocumentChunker
from doc_chunker.domain.exceptions import (
    ChunkingDomainError,
    ConfigurationError,
    OverlapConfigurationError,
    UnsupportedStrategyError,
)
from doc_chunker.domain.value_objects.chunk_config import ChunkConfig


class TestDomainExceptions:
    """Test suite for domain exceptions."""

    def test_chunking_domain_error_base(self) -> None:
        """Test base domain error."""
        # Act
        error = ChunkingDomainError("Base domain error")

        # Assert
        assert str(error) == "Base domain error"
        assert error.message == "Base domain error"
        assert error.details == {}
        assert isinstance(error, Exception)

    def test_chunking_domain_error_details(self) -> None:
        error = ChunkingDomainError("Bad value", {"field": "chunk_size"})

        assert error.details == {"field": "chunk_size"}

    def test_configuration_error_hierarchy(self) -> None:
        """Test that configuration errors are domain errors."""
        error = ConfigurationError("chunk_size must be positive")

        assert isinstance(error, ChunkingDomainError)

    def test_overlap_configuration_error(self) -> None:
        """Test OverlapConfigurationError with size information."""
        # Act
        error = OverlapConfigurationError(120, 100)

        # Assert
        assert isinstance(error, ConfigurationError)
        assert error.overlap == 120
        assert error.chunk_size == 100
        assert str(error) == "Overlap 120 must be less than chunk size 100"

    def test_unsupported_strategy_error(self) -> None:
        """Test UnsupportedStrategyError message and ValueError compatibility."""
        # Act
        error = UnsupportedStrategyError("token", ["recursive", "fixed"])

        # Assert
        assert isinstance(error, ChunkingDomainError)
        assert isinstance(error, ValueError)
        assert error.strategy_name == "token"
        assert str(error) == "Strategy 'token' not supported. Available strategies: recursive, fixed"
        assert error.details["available"] == ["recursive", "fixed"]

    def test_unsupported_strategy_error_without_available(self) -> None:
        assert str(UnsupportedStrategyError("token")) == "Strategy 'token' not supported"


class TestBusinessRuleEnforcement:
    """Errors are raised at construction time, before any text is processed."""

    def test_invalid_overlap_fails_before_chunking(self) -> None:
        with pytest.raises(ConfigurationError):
            DocumentChunker(ChunkConfig(chunk_size=10, chunk_overlap=10))

    def test_unknown_strategy_fails_at_dispatch(self) -> None:
        """Test that an unknown strategy is rejected when the engine is built."""
        # Arrange
        config = ChunkConfig(chunk_size=100, strategy="token")

        # Act & Assert
        with pytest.raises(UnsupportedStrategyError, match="Strategy 'token' not supported"):
            DocumentChunker(config)

    def test_valid_input_never_raises(self) -> None:
        """Test that well-formed text of any shape is chunked without errors."""
        chunker = DocumentChunker(ChunkConfig(chunk_size=5, chunk_overlap=2))

        for text in ["", "   ", "\n\n\n", "x", "a" * 1000, "💡 émoji ✓ " * 20]:
            result = chunker.chunk(text)
            assert all(len(chunk.content) <= 10 for chunk in result.chunks)
