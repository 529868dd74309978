#!/usr/bin/env python3
"""
Domain-specific exceptions for chunking operations.

These exceptions represent business rule violations detected before any text
is processed. Segmentation itself never raises for well-formed input.
"""

from typing import Any


class ChunkingDomainError(Exception):
    """Base exception for all chunking domain errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error with message and optional details."""
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(ChunkingDomainError):
    """Raised when chunking configuration violates business rules."""


class OverlapConfigurationError(ConfigurationError):
    """Raised when overlap configuration is invalid."""

    def __init__(self, overlap: int, chunk_size: int) -> None:
        """Initialize with overlap information."""
        super().__init__(
            f"Overlap {overlap} must be less than chunk size {chunk_size}",
            {"chunk_overlap": overlap, "chunk_size": chunk_size},
        )
        self.overlap = overlap
        self.chunk_size = chunk_size


class UnsupportedStrategyError(ChunkingDomainError, ValueError):
    """Raised when a requested chunking strategy is not known."""

    def __init__(self, strategy_name: str, available: list[str] | None = None) -> None:
        """Initialize with strategy name."""
        message = f"Strategy '{strategy_name}' not supported"
        if available:
            message += f". Available strategies: {', '.join(available)}"
        super().__init__(message, {"strategy_name": strategy_name, "available": available or []})
        self.strategy_name = strategy_name
