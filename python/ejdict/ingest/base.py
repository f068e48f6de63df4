"""Base ingestor interface for dictionary sources.

All ingestors inherit from Ingestor and implement the parse() method.
This provides a consistent API for loading entries from any source format.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Iterator
import urllib.request

from ..errors import EntryParseError
from ..logging_config import get_logger
from ..schema import Entry

logger = get_logger(__name__)


@dataclass
class IngestResult:
    """Result of ingesting a dictionary source."""

    entries: list[Entry]
    source_path: str
    dict_name: str
    total_raw: int = 0          # Non-blank lines in source
    total_valid: int = 0        # Entries parsed
    total_skipped: int = 0      # Malformed lines
    errors: list[str] = field(default_factory=list)

    def __repr__(self) -> str:
        return (
            f"IngestResult({self.dict_name}: "
            f"{self.total_valid}/{self.total_raw} valid, "
            f"{self.total_skipped} skipped)"
        )


class Ingestor(ABC):
    """Base class for dictionary ingestors.

    Subclasses must implement:
        - parse(filepath) -> Iterator of (line_text, line_number) tuples

    The ingest() method turns lines into entries and collects errors.
    Entries keep source order.
    """

    def __init__(self, encoding: str = "utf-8"):
        """Initialize ingestor.

        Args:
            encoding: Text encoding of source files.
        """
        self.encoding = encoding

    @abstractmethod
    def parse(self, filepath: Path) -> Iterator[tuple[str, Optional[int]]]:
        """Parse source file and yield (line, line_number) tuples.

        Args:
            filepath: Path to source file.

        Yields:
            Tuples of (raw_line, line_number) for non-blank lines.
        """
        pass

    def parse_entry(self, line: str, line_number: Optional[int]) -> Entry:
        """Turn one raw line into an Entry."""
        return Entry.parse_line(line, line_number)

    def get_dict_name(self, filepath: Path) -> str:
        """Generate dictionary name from filepath."""
        return filepath.stem

    def ingest(self, filepath: Path | str) -> IngestResult:
        """Ingest dictionary from file.

        Args:
            filepath: Path to source file.

        Returns:
            IngestResult with entries and statistics.
        """
        filepath = Path(filepath)
        dict_name = self.get_dict_name(filepath)
        filepath_str = str(filepath.resolve())

        entries: list[Entry] = []
        total_raw = 0
        errors: list[str] = []

        for line, line_num in self.parse(filepath):
            total_raw += 1
            try:
                entries.append(self.parse_entry(line, line_num))
            except EntryParseError as e:
                errors.append(str(e))

        if errors:
            logger.warning("%s: skipped %d malformed lines", dict_name, len(errors))
        logger.info("%s: ingested %d entries", dict_name, len(entries))

        return IngestResult(
            entries=entries,
            source_path=filepath_str,
            dict_name=dict_name,
            total_raw=total_raw,
            total_valid=len(entries),
            total_skipped=len(errors),
            errors=errors,
        )


class DownloadableIngestor(Ingestor):
    """Ingestor that can download its source file."""

    def __init__(
        self,
        url: str,
        cache_dir: Path | str,
        encoding: str = "utf-8",
    ):
        super().__init__(encoding)
        self.url = url
        self.cache_dir = Path(cache_dir)

    def get_cached_path(self) -> Path:
        """Get path where downloaded file should be cached."""
        filename = self.url.split("/")[-1]
        if not filename:
            raise ValueError(f"Cannot derive a filename from URL: {self.url}")
        return self.cache_dir / filename

    def download(self, force: bool = False) -> Path:
        """Download source file if not cached.

        Args:
            force: Force re-download even if cached.

        Returns:
            Path to cached file.
        """
        cached_path = self.get_cached_path()

        if cached_path.exists() and not force:
            logger.info("Using cached: %s", cached_path)
            return cached_path

        self.cache_dir.mkdir(parents=True, exist_ok=True)

        logger.info("Downloading from: %s", self.url)
        urllib.request.urlretrieve(self.url, cached_path)
        logger.info("Saved to: %s", cached_path)

        return cached_path

    def download_and_ingest(self, force: bool = False) -> IngestResult:
        """Download and ingest in one step."""
        filepath = self.download(force=force)
        return self.ingest(filepath)
