"""ejdict - English-Japanese dictionary lookup.

Looks up English headwords in the public-domain EJDict dictionary
(https://github.com/kujirahand/EJDict). The dictionary is built once into
a JSON file and loaded lazily on first use.

Core concepts:
    - An entry has one or more headwords and one meaning string
    - Lookups scan entries in storage order; the first match wins
    - Candidate searches yield every match lazily, one at a time

Usage:
    import ejdict
    from ejdict import SearchMode

    entry = ejdict.look("apple", SearchMode.EXACT)
    print(entry.meaning)

    for entry in ejdict.candidates("apple", SearchMode.FUZZY).take(5):
        print(entry.headwords, entry.meaning)

    # Bring your own dictionary instead of the configured file
    d = Dictionary.from_entries([Entry(("apple",), "『リンゴ』")])
    ejdict.look("apple", SearchMode.EXACT, dictionary=d)
"""

from typing import Optional

from .errors import (
    DictionaryLoadError,
    EjdictError,
    EntryParseError,
    InvalidSearchModeName,
    NotFoundError,
)
from .schema import Dictionary, Entry
from .search import Candidates, SearchMode, matches, parse_mode
from .store import DictionaryStore, default_store

__version__ = "0.1.0"


def _resolve(dictionary: Optional[Dictionary]) -> Dictionary:
    if dictionary is not None:
        return dictionary
    return default_store().get()


def look(
    pattern: str,
    mode: SearchMode,
    dictionary: Optional[Dictionary] = None,
) -> Entry:
    """Look up the first entry matching pattern.

    Args:
        pattern: Headword to search for.
        mode: Comparison strategy.
        dictionary: Dictionary to search (default: the configured one).

    Returns:
        The first matching entry in storage order.

    Raises:
        NotFoundError: If no entry matches.
        DictionaryLoadError: If the default dictionary cannot be loaded.
    """
    entry = _resolve(dictionary).look(pattern, mode)
    if entry is None:
        raise NotFoundError(pattern)
    return entry


def candidates(
    pattern: str,
    mode: SearchMode,
    dictionary: Optional[Dictionary] = None,
) -> Candidates:
    """Get a lazy sequence of matching entries.

    No limit is applied; use ``Candidates.take()`` or ``itertools.islice``.

    Raises:
        DictionaryLoadError: If the default dictionary cannot be loaded.
    """
    return _resolve(dictionary).candidates(pattern, mode)


__all__ = [
    "Candidates",
    "Dictionary",
    "DictionaryLoadError",
    "DictionaryStore",
    "EjdictError",
    "Entry",
    "EntryParseError",
    "InvalidSearchModeName",
    "NotFoundError",
    "SearchMode",
    "candidates",
    "default_store",
    "look",
    "matches",
    "parse_mode",
]
