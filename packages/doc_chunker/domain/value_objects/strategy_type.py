#!/usr/bin/env python3
"""Identifiers of the available segmentation strategies."""

from enum import Enum

from doc_chunker.domain.exceptions import UnsupportedStrategyError


class StrategyType(str, Enum):
    """Enumeration of available chunking strategies."""

    RECURSIVE = "recursive"
    SEMANTIC = "semantic"
    MARKDOWN = "markdown"
    SENTENCE = "sentence"
    FIXED = "fixed"

    @classmethod
    def parse(cls, value: "str | StrategyType") -> "StrategyType":
        """
        Resolve a strategy identifier.

        Args:
            value: Strategy enum member or its (case-insensitive) string value

        Returns:
            The matching StrategyType

        Raises:
            UnsupportedStrategyError: If the identifier is unknown
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnsupportedStrategyError(str(value), [s.value for s in cls]) from None
