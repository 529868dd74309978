"""Command line interface for the document chunker."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import click

from doc_chunker.chunker import DocumentChunker
from doc_chunker.config import settings
from doc_chunker.domain.exceptions import ChunkingDomainError
from doc_chunker.domain.services.strategy_factory import ChunkingStrategyFactory
from doc_chunker.domain.value_objects.chunk_config import ChunkConfig

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def _build_chunker(options: dict[str, Any]) -> DocumentChunker:
    overrides = {key: value for key, value in options.items() if value is not None}
    try:
        return DocumentChunker(ChunkConfig.from_settings(**overrides))
    except ChunkingDomainError as exc:
        raise click.ClickException(str(exc)) from exc


def _chunk_options(func):
    """Shared configuration options for commands that chunk a file."""
    options = [
        click.option(
            "--strategy",
            "-s",
            type=click.Choice(ChunkingStrategyFactory.get_available_strategies(), case_sensitive=False),
            default=None,
            help="Segmentation strategy (defaults to CHUNKING_DEFAULT_STRATEGY).",
        ),
        click.option("--chunk-size", type=int, default=None, help="Target chunk length in characters."),
        click.option("--chunk-overlap", type=int, default=None, help="Characters shared by consecutive chunks."),
        click.option("--min-chunk-size", type=int, default=None, help="Merge chunks shorter than this."),
        click.option("--max-chunk-size", type=int, default=None, help="Hard upper bound on chunk length."),
        click.option(
            "--keep-separator/--no-keep-separator",
            default=None,
            help="Keep boundary delimiters at chunk edges.",
        ),
        click.option("--verbose", "-v", is_flag=True, help="Enable debug logging."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _read_source(path: str) -> str:
    if path == "-":
        return click.get_text_stream("stdin").read()
    return Path(path).read_text(encoding="utf-8")


@click.group()
@click.version_option(package_name="document-chunker")
def cli() -> None:
    """Split text documents into bounded, overlapping chunks."""


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@_chunk_options
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    help="Write JSON here instead of stdout.",
)
@click.option("--indent", type=int, default=2, show_default=True, help="JSON indentation.")
def chunk(path: str, output: str | None, indent: int, verbose: bool, **options: Any) -> None:
    """Chunk PATH and print the result as JSON."""
    _configure_logging(verbose)
    chunker = _build_chunker(options)

    result = chunker.chunk(_read_source(path), {"source": path})
    payload = json.dumps(result.to_dict(), indent=indent, ensure_ascii=False)

    if output:
        Path(output).write_text(payload + "\n", encoding="utf-8")
        logger.info(f"Wrote {result.total_chunks} chunks to {output}")
    else:
        click.echo(payload)


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@_chunk_options
def stats(path: str, verbose: bool, **options: Any) -> None:
    """Chunk PATH and print summary statistics."""
    _configure_logging(verbose)
    chunker = _build_chunker(options)

    result = chunker.chunk(_read_source(path), {"source": path})
    for key, value in chunker.get_stats(result).to_dict().items():
        click.echo(f"{key}: {value}")


@cli.command()
def strategies() -> None:
    """List the available strategies."""
    for name in ChunkingStrategyFactory.get_available_strategies():
        click.echo(name)


def main() -> None:
    """Run the doc-chunker CLI."""
    cli()
