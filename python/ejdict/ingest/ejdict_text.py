"""EJDict tab-separated text ingestor.

Parses ejdic-hand-utf8.txt from kujirahand/EJDict (public domain).

Format:
    apple\\t『リンゴ』;リンゴの木
    A,a\\tエイ(英語アルファベットの第1字)
    <headword>[,<headword>...]\\t<meaning>

Headwords keep their case. The meaning is stored verbatim.
"""

from pathlib import Path
from typing import Iterator, Optional

from .. import config as cfg
from .base import DownloadableIngestor


class EjdictTextIngestor(DownloadableIngestor):
    """Ingestor for the EJDict text release."""

    def __init__(
        self,
        cache_dir: Path | str,
        url: Optional[str] = None,
        encoding: str = "utf-8",
    ):
        super().__init__(url or cfg.default_source_url(), cache_dir, encoding)

    def get_dict_name(self, filepath: Path) -> str:
        """Generate dictionary name."""
        return f"ejdict_{filepath.stem}"

    def parse(self, filepath: Path) -> Iterator[tuple[str, Optional[int]]]:
        """Parse EJDict text file.

        Args:
            filepath: Path to .txt file.

        Yields:
            Tuples of (line, line_number), line terminator removed.
        """
        with open(filepath, "r", encoding=self.encoding) as f:
            for line_num, line in enumerate(f, start=1):
                line = line.rstrip("\r\n")
                if not line.strip():
                    continue
                yield line, line_num


def ingest(filepath: Path | str, encoding: str = "utf-8"):
    """Convenience function to ingest a local EJDict text file.

    Args:
        filepath: Path to .txt file.
        encoding: Text encoding.

    Returns:
        IngestResult with entries.
    """
    ingestor = EjdictTextIngestor(
        cache_dir=Path(filepath).parent,
        encoding=encoding,
    )
    return ingestor.ingest(filepath)


def download_and_ingest(
    cache_dir: Path | str,
    url: Optional[str] = None,
    force: bool = False,
):
    """Download and ingest the EJDict text release.

    Args:
        cache_dir: Directory to cache downloaded files.
        url: Source URL (default: configured EJDict URL).
        force: Force re-download.

    Returns:
        IngestResult with entries.
    """
    ingestor = EjdictTextIngestor(cache_dir=cache_dir, url=url)
    return ingestor.download_and_ingest(force=force)
