"""Dictionary ingestion module.

Provides pluggable ingestors for raw dictionary formats:
- EJDict tab-separated text (ejdic-hand-utf8.txt)
- Custom formats via register_ingestor()

Usage:
    from ejdict.ingest import ejdict_text

    result = ejdict_text.ingest("path/to/ejdic-hand-utf8.txt")
    result = ejdict_text.download_and_ingest(cache_dir="./sources")
"""

from .base import Ingestor, IngestResult, DownloadableIngestor
from . import ejdict_text

# Register available ingestors
INGESTORS: dict[str, type[Ingestor]] = {
    "ejdict_text": ejdict_text.EjdictTextIngestor,
}


def get_ingestor(name: str) -> type[Ingestor]:
    """Get ingestor class by name."""
    if name not in INGESTORS:
        raise ValueError(f"Unknown ingestor: {name}. Available: {list(INGESTORS.keys())}")
    return INGESTORS[name]


def register_ingestor(name: str, ingestor_cls: type[Ingestor]) -> None:
    """Register a custom ingestor."""
    INGESTORS[name] = ingestor_cls


__all__ = [
    "Ingestor",
    "IngestResult",
    "DownloadableIngestor",
    "ejdict_text",
    "get_ingestor",
    "register_ingestor",
    "INGESTORS",
]
