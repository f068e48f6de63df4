"""Entry and dictionary data structures for ejdict.

Core concept:
    - An entry pairs one or more equivalent English headwords with a
      single Japanese meaning string
    - A dictionary is an ordered, read-only tuple of entries
    - Storage order decides which entry wins a lookup

Serialized form (field names follow the EJDict JSON payload):
    {"words": [{"words": ["apple"], "mean": "『リンゴ』;リンゴの木"}, ...]}
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Iterator, Optional
import json

from .errors import EntryParseError
from .search import Candidates, SearchMode, matches


@dataclass(frozen=True)
class Entry:
    """A single dictionary record."""

    headwords: tuple[str, ...]  # e.g., ("apple",), case-sensitive as stored
    meaning: str                # slash-delimited sub-definitions

    def __post_init__(self):
        """Freeze headwords into a tuple."""
        if not isinstance(self.headwords, tuple):
            object.__setattr__(self, "headwords", tuple(self.headwords))

    @classmethod
    def parse_line(cls, line: str, line_number: Optional[int] = None) -> "Entry":
        """Parse one raw EJDict line.

        Format: ``<comma-separated headwords>\\t<meaning>``. Only the line
        terminator is stripped; the first tab splits headwords from meaning.

        Args:
            line: Raw text line.
            line_number: Source line number, reported on failure.

        Returns:
            Parsed Entry.

        Raises:
            EntryParseError: If the line has no tab or an empty headword.
        """
        line = line.rstrip("\r\n")
        if "\t" not in line:
            raise EntryParseError(line, line_number)
        words, mean = line.split("\t", 1)
        headwords = tuple(words.split(","))
        if not all(headwords):
            raise EntryParseError(line, line_number)
        return cls(headwords=headwords, meaning=mean)

    def matches(self, pattern: str, mode: SearchMode) -> bool:
        """Check if any headword matches pattern under mode."""
        return matches(self, pattern, mode)

    def meanings(self) -> list[str]:
        """Split the meaning into trimmed sub-definitions for display."""
        return [part.strip() for part in self.meaning.split("/")]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "words": list(self.headwords),
            "mean": self.meaning,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Entry":
        """Create from dictionary.

        Raises:
            KeyError: If a field is missing.
            TypeError: If words is not a list of strings or mean is not a string.
            ValueError: If words is empty or holds an empty headword.
        """
        words = data["words"]
        mean = data["mean"]
        if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
            raise TypeError(f"words must be a list of strings, got {words!r}")
        if not words or not all(words):
            raise ValueError(f"words must hold non-empty headwords, got {words!r}")
        if not isinstance(mean, str):
            raise TypeError(f"mean must be a string, got {mean!r}")
        return cls(headwords=tuple(words), meaning=mean)


@dataclass(frozen=True)
class Dictionary:
    """An immutable, ordered collection of entries."""

    entries: tuple[Entry, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not isinstance(self.entries, tuple):
            object.__setattr__(self, "entries", tuple(self.entries))

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def look(self, pattern: str, mode: SearchMode) -> Optional[Entry]:
        """Return the first entry in storage order matching pattern.

        Linear scan; no index is built.

        Args:
            pattern: String to search for.
            mode: Comparison strategy.

        Returns:
            The matching entry, or None if nothing matches.
        """
        for entry in self.entries:
            if entry.matches(pattern, mode):
                return entry
        return None

    def candidates(self, pattern: str, mode: SearchMode) -> Candidates:
        """Return a lazy sequence of all entries matching pattern.

        The sequence iterates over this dictionary's entry tuple, which
        never changes, so it is independent of later calls.

        Args:
            pattern: String to search for.
            mode: Comparison strategy.

        Returns:
            Candidates yielding matches in storage order.
        """
        return Candidates(self.entries, pattern, mode)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"words": [e.to_dict() for e in self.entries]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Dictionary":
        """Create from dictionary."""
        entries = data["words"]
        if not isinstance(entries, list):
            raise TypeError(f"words must be a list of entries, got {type(entries).__name__}")
        return cls(entries=tuple(Entry.from_dict(e) for e in entries))

    @classmethod
    def from_entries(cls, entries: Iterable[Entry]) -> "Dictionary":
        """Create from an ordered iterable of entries."""
        return cls(entries=tuple(entries))

    def save(self, filepath: Path) -> None:
        """Save dictionary to JSON file."""
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

    @classmethod
    def load(cls, filepath: Path) -> "Dictionary":
        """Load dictionary from JSON file."""
        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)
        return cls.from_dict(data)
