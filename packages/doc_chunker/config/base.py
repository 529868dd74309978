# doc_chunker/config/base.py

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ChunkingSettings(BaseSettings):
    """
    Environment-driven defaults for the chunking engine.
    Every field can be overridden with a ``CHUNKING_``-prefixed variable.
    """

    # Default chunk configuration
    DEFAULT_STRATEGY: str = "recursive"
    DEFAULT_CHUNK_SIZE: int = Field(default=500, gt=0)
    DEFAULT_CHUNK_OVERLAP: int = Field(default=50, ge=0)
    DEFAULT_KEEP_SEPARATOR: bool = True
    DEFAULT_MIN_CHUNK_SIZE: int = Field(default=0, ge=0)
    DEFAULT_MAX_CHUNK_SIZE: int | None = None  # None -> 2x chunk size

    # Logging (only applied by the CLI; the engine never configures handlers)
    LOG_LEVEL: str = "INFO"

    # Pydantic model config
    model_config = SettingsConfigDict(
        env_prefix="CHUNKING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
