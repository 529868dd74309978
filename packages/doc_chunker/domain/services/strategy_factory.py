#!/usr/bin/env python3
"""
Factory for segmentation strategies.

The dispatcher resolves exactly one strategy from a validated configuration.
It performs no text analysis itself.
"""

import logging

from doc_chunker.domain.exceptions import UnsupportedStrategyError
from doc_chunker.domain.services.chunking_strategies.base import ChunkingStrategy
from doc_chunker.domain.services.chunking_strategies.fixed import FixedSizeChunkingStrategy
from doc_chunker.domain.services.chunking_strategies.markdown import MarkdownChunkingStrategy
from doc_chunker.domain.services.chunking_strategies.recursive import RecursiveChunkingStrategy
from doc_chunker.domain.services.chunking_strategies.semantic import SemanticChunkingStrategy
from doc_chunker.domain.services.chunking_strategies.sentence import SentenceChunkingStrategy
from doc_chunker.domain.value_objects.chunk_config import ChunkConfig
from doc_chunker.domain.value_objects.strategy_type import StrategyType

logger = logging.getLogger(__name__)


class ChunkingStrategyFactory:
    """Creates the segmentation strategy selected by a configuration."""

    @staticmethod
    def create_strategy(config: ChunkConfig) -> ChunkingStrategy:
        """
        Create the strategy named by ``config.strategy``.

        Args:
            config: Validated chunking configuration

        Returns:
            Strategy instance bound to the configuration

        Raises:
            UnsupportedStrategyError: If the strategy identifier is unknown
        """
        strategy_type = StrategyType.parse(config.strategy)

        logger.debug(f"Creating {strategy_type.value} strategy")

        if strategy_type == StrategyType.RECURSIVE:
            return RecursiveChunkingStrategy(config)
        if strategy_type == StrategyType.SEMANTIC:
            return SemanticChunkingStrategy(config)
        if strategy_type == StrategyType.MARKDOWN:
            return MarkdownChunkingStrategy(config)
        if strategy_type == StrategyType.SENTENCE:
            return SentenceChunkingStrategy(config)
        if strategy_type == StrategyType.FIXED:
            return FixedSizeChunkingStrategy(config)
        raise UnsupportedStrategyError(str(strategy_type), ChunkingStrategyFactory.get_available_strategies())

    @staticmethod
    def get_available_strategies() -> list[str]:
        """
        Get list of available strategy types.

        Returns:
            List of strategy type names
        """
        return [s.value for s in StrategyType]
