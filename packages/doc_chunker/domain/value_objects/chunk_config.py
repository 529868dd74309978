#!/usr/bin/env python3
"""
Immutable chunking configuration value object.

This module defines the configuration for chunking operations with built-in
validation and business rule enforcement. A config that exists is valid:
every rule is checked at construction time, before any text is processed.
"""

from dataclasses import asdict, dataclass, field, replace
from typing import TYPE_CHECKING, Any

from doc_chunker.domain.exceptions import ConfigurationError, OverlapConfigurationError
from doc_chunker.domain.value_objects.strategy_type import StrategyType

if TYPE_CHECKING:
    from doc_chunker.config import ChunkingSettings


@dataclass(frozen=True)
class ChunkConfig:
    """
    Immutable configuration for chunking operations.

    Invariant: ``0 <= chunk_overlap < chunk_size <= max_chunk_size`` and
    ``min_chunk_size <= max_chunk_size // 2``.

    Attributes:
        chunk_size: Target chunk length in characters
        chunk_overlap: Characters shared between consecutive chunks
        strategy: Segmentation strategy identifier
        keep_separator: Whether boundary delimiters stay at chunk edges
        min_chunk_size: Chunks shorter than this are merged into a neighbour
        max_chunk_size: Hard upper bound on chunk length (defaults to 2x chunk_size)
    """

    chunk_size: int
    chunk_overlap: int = 0
    strategy: StrategyType | str = StrategyType.RECURSIVE
    keep_separator: bool = True
    min_chunk_size: int = 0
    max_chunk_size: int | None = field(default=None)

    def __post_init__(self) -> None:
        """Fill derived defaults and validate."""
        # Known identifiers are normalised; unknown ones are left for the dispatcher to reject
        if not isinstance(self.strategy, StrategyType):
            candidate = str(self.strategy).strip().lower()
            if candidate in StrategyType._value2member_map_:
                object.__setattr__(self, "strategy", StrategyType(candidate))

        if self.max_chunk_size is None and isinstance(self.chunk_size, int):
            object.__setattr__(self, "max_chunk_size", self.chunk_size * 2)

        self._validate()

    def _validate(self) -> None:
        """Validate configuration after initialization."""
        for name in ("chunk_size", "chunk_overlap", "min_chunk_size", "max_chunk_size"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(
                    f"{name} must be an integer, got {type(value).__name__}",
                    {name: value},
                )

        if self.chunk_size <= 0:
            raise ConfigurationError(
                "chunk_size must be positive",
                {"chunk_size": self.chunk_size},
            )

        if self.chunk_overlap < 0:
            raise ConfigurationError(
                "chunk_overlap cannot be negative",
                {"chunk_overlap": self.chunk_overlap},
            )

        if self.chunk_overlap >= self.chunk_size:
            raise OverlapConfigurationError(self.chunk_overlap, self.chunk_size)

        if self.max_chunk_size < self.chunk_size:
            raise ConfigurationError(
                "max_chunk_size cannot be less than chunk_size",
                {"max_chunk_size": self.max_chunk_size, "chunk_size": self.chunk_size},
            )

        if self.min_chunk_size < 0:
            raise ConfigurationError(
                "min_chunk_size cannot be negative",
                {"min_chunk_size": self.min_chunk_size},
            )

        # Balanced hard splits produce pieces of at least max_chunk_size // 2
        if self.min_chunk_size > self.max_chunk_size // 2:
            raise ConfigurationError(
                "min_chunk_size cannot exceed half of max_chunk_size",
                {"min_chunk_size": self.min_chunk_size, "max_chunk_size": self.max_chunk_size},
            )

    @property
    def strategy_name(self) -> str:
        """Get the strategy identifier as a plain string."""
        if isinstance(self.strategy, StrategyType):
            return self.strategy.value
        return str(self.strategy)

    @property
    def step(self) -> int:
        """Distance between the starts of consecutive fixed-size windows."""
        return self.chunk_size - self.chunk_overlap

    def with_updates(self, **changes: Any) -> "ChunkConfig":
        """
        Return a new validated configuration with some fields replaced.

        ``max_chunk_size`` is re-derived from ``chunk_size`` when only the
        latter changes and the current maximum was the derived default.
        """
        if "chunk_size" in changes and "max_chunk_size" not in changes:
            if self.max_chunk_size == self.chunk_size * 2:
                changes["max_chunk_size"] = None
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        result = asdict(self)
        result["strategy"] = self.strategy_name
        return result

    @classmethod
    def from_settings(cls, settings: "ChunkingSettings | None" = None, **overrides: Any) -> "ChunkConfig":
        """
        Build the default configuration from environment-driven settings.

        Overrides are applied before validation, so they can repair settings
        that would be invalid on their own.

        Args:
            settings: Settings instance, defaults to the module-level settings
            **overrides: ChunkConfig fields that replace the settings values

        Returns:
            Validated configuration
        """
        if settings is None:
            from doc_chunker.config import settings as default_settings

            settings = default_settings

        params: dict[str, Any] = {
            "chunk_size": settings.DEFAULT_CHUNK_SIZE,
            "chunk_overlap": settings.DEFAULT_CHUNK_OVERLAP,
            "strategy": settings.DEFAULT_STRATEGY,
            "keep_separator": settings.DEFAULT_KEEP_SEPARATOR,
            "min_chunk_size": settings.DEFAULT_MIN_CHUNK_SIZE,
            "max_chunk_size": settings.DEFAULT_MAX_CHUNK_SIZE,
        }
        params.update(overrides)
        return cls(**params)
