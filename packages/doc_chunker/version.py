"""Version lookup: installed distribution metadata, else the VERSION file of a source checkout."""

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

DISTRIBUTION_NAME = "document-chunker"


def get_version() -> str:
    """Get the installed doc_chunker version, or the checkout's VERSION file."""
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        version_file = Path(__file__).resolve().parents[2] / "VERSION"
        if version_file.is_file():
            return version_file.read_text().strip()
        return "0.0.0"


__version__ = get_version()
