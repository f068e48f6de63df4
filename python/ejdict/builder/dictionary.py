"""Dictionary builder for the serialized JSON payload.

Collects entries from ingest results in order and writes the single
JSON file the loader reads at runtime.

Output structure:
    data/
    └── ejdict.json     {"words": [{"words": [...], "mean": "..."}, ...]}
"""

from dataclasses import dataclass, field
from pathlib import Path

from ..logging_config import get_logger
from ..schema import Entry, Dictionary
from ..ingest.base import IngestResult

logger = get_logger(__name__)


@dataclass
class BuildStats:
    """Statistics from a build operation."""

    total_entries: int = 0
    total_headwords: int = 0
    by_source: dict[str, int] = field(default_factory=dict)
    files_written: list[str] = field(default_factory=list)
    skipped: bool = False       # Output existed and force was not set


class DictionaryBuilder:
    """Builds the JSON dictionary file from ingested entries."""

    def __init__(self):
        self._entries: list[Entry] = []
        self._by_source: dict[str, int] = {}

    def add_entries(self, result: IngestResult) -> None:
        """Add entries from an IngestResult, keeping their order.

        Args:
            result: IngestResult from an ingestor.
        """
        self._entries.extend(result.entries)
        self._by_source[result.dict_name] = (
            self._by_source.get(result.dict_name, 0) + len(result.entries)
        )

    def add_entry(self, entry: Entry, source: str = "manual") -> None:
        """Add a single entry.

        Args:
            entry: Entry to append.
            source: Name counted in BuildStats.by_source.
        """
        self._entries.append(entry)
        self._by_source[source] = self._by_source.get(source, 0) + 1

    def get_entry_count(self) -> int:
        """Get number of collected entries."""
        return len(self._entries)

    def to_dictionary(self) -> Dictionary:
        """Freeze collected entries into a Dictionary."""
        return Dictionary.from_entries(self._entries)

    @staticmethod
    def needs_build(output_path: Path | str, force: bool = False) -> bool:
        """Check whether output_path should be (re)written."""
        return force or not Path(output_path).exists()

    def build(self, output_path: Path | str, force: bool = False) -> BuildStats:
        """Write the dictionary file.

        Args:
            output_path: Destination JSON file.
            force: Overwrite an existing file.

        Returns:
            BuildStats with counts and file paths.
        """
        output_path = Path(output_path)
        stats = BuildStats()

        if not self.needs_build(output_path, force):
            logger.info("%s exists, skipping build", output_path)
            stats.skipped = True
            return stats

        dictionary = self.to_dictionary()
        dictionary.save(output_path)

        stats.total_entries = len(dictionary)
        stats.total_headwords = sum(len(e.headwords) for e in dictionary)
        stats.by_source = dict(self._by_source)
        stats.files_written.append(str(output_path))
        logger.info("Wrote %d entries to %s", stats.total_entries, output_path)

        return stats
