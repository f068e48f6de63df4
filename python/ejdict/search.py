"""Search modes, headword matching and lazy candidate iteration.

Three match modes are supported:

    exact  - headword == pattern
    lower  - headword and pattern compared after lowercasing both
    fuzzy  - headword starts with pattern ("" matches everything)

An entry matches when any one of its headwords matches.
"""

from enum import Enum
from typing import TYPE_CHECKING, Iterable, Iterator

from .errors import InvalidSearchModeName

if TYPE_CHECKING:
    from .schema import Entry


class SearchMode(Enum):
    """Headword comparison strategy."""

    EXACT = "exact"
    LOWER = "lower"
    FUZZY = "fuzzy"

    def __str__(self) -> str:
        return self.value


def parse_mode(name: str) -> SearchMode:
    """Convert a mode name into a SearchMode.

    Only the canonical lowercase names are accepted. No default is
    substituted on failure; callers that want one must catch the error.

    Args:
        name: "exact", "lower" or "fuzzy".

    Returns:
        The matching SearchMode.

    Raises:
        InvalidSearchModeName: If name is anything else.
    """
    for mode in SearchMode:
        if mode.value == name:
            return mode
    raise InvalidSearchModeName(name)


def headword_matches(headword: str, pattern: str, mode: SearchMode) -> bool:
    """Test a single headword against a pattern."""
    if mode is SearchMode.EXACT:
        return headword == pattern
    if mode is SearchMode.LOWER:
        return headword.lower() == pattern.lower()
    if mode is SearchMode.FUZZY:
        return headword.startswith(pattern)
    raise ValueError(f"Unknown search mode: {mode!r}")


def matches(entry: "Entry", pattern: str, mode: SearchMode) -> bool:
    """Check whether any headword of entry matches pattern under mode."""
    return any(headword_matches(hw, pattern, mode) for hw in entry.headwords)


class Candidates:
    """Forward-only sequence of entries matching a pattern.

    Each call to ``next()`` resumes scanning where the previous one
    stopped and returns the next matching entry. Once the source runs
    out the sequence stays exhausted; it cannot be rewound.

    Not safe to drive from more than one thread.
    """

    def __init__(self, source: Iterable["Entry"], pattern: str, mode: SearchMode):
        self._source: Iterator["Entry"] = iter(source)
        self.pattern = pattern
        self.mode = mode
        self._exhausted = False

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def __iter__(self) -> "Candidates":
        return self

    def __next__(self) -> "Entry":
        if self._exhausted:
            raise StopIteration
        for entry in self._source:
            if matches(entry, self.pattern, self.mode):
                return entry
        self._exhausted = True
        raise StopIteration

    def take(self, limit: int) -> list["Entry"]:
        """Pull at most ``limit`` further matches."""
        results: list["Entry"] = []
        while len(results) < limit:
            try:
                results.append(next(self))
            except StopIteration:
                break
        return results

    def __repr__(self) -> str:
        state = "exhausted" if self._exhausted else "active"
        return f"Candidates(pattern={self.pattern!r}, mode={self.mode}, {state})"
