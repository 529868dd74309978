# doc_chunker/config/__init__.py
"""
Configuration module for engine defaults.
Instantiates a default settings object at import time.
"""

from .base import ChunkingSettings

# Instantiate settings once and export
settings = ChunkingSettings()

__all__ = ["ChunkingSettings", "settings"]
