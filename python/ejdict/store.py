"""Process-wide, load-once dictionary holder.

The serialized dictionary is read on first use and kept for the life of
the process. Loading happens under a lock: the first caller builds the
Dictionary, concurrent callers wait for it and then share the result.
After that ``get()`` is a plain attribute read.

Usage:
    from ejdict.store import DictionaryStore

    store = DictionaryStore(path=Path("data/ejdict.json"))
    entry = store.get().look("apple", SearchMode.EXACT)
"""

from pathlib import Path
from typing import Callable, Optional
import json
import threading

from . import config as cfg
from .errors import DictionaryLoadError
from .logging_config import get_logger
from .schema import Dictionary

logger = get_logger(__name__)


class DictionaryStore:
    """Initialize-once holder for a read-only Dictionary."""

    def __init__(
        self,
        path: Optional[Path | str] = None,
        loader: Optional[Callable[[], Dictionary]] = None,
    ):
        """Initialize store.

        Args:
            path: JSON dictionary file. Ignored when loader is given.
            loader: Callable producing the Dictionary, used instead of
                reading path.
        """
        if path is None and loader is None:
            raise ValueError("DictionaryStore needs a path or a loader")
        self.path = Path(path) if path is not None else None
        self._loader = loader
        self._dictionary: Optional[Dictionary] = None
        self._lock = threading.Lock()

    @property
    def loaded(self) -> bool:
        return self._dictionary is not None

    def get(self) -> Dictionary:
        """Return the dictionary, loading it on first call.

        Raises:
            DictionaryLoadError: If the payload is missing or corrupt.
                The store stays unloaded and the next call retries.
        """
        dictionary = self._dictionary
        if dictionary is not None:
            return dictionary

        with self._lock:
            if self._dictionary is None:
                self._dictionary = self._load()
            return self._dictionary

    def _load(self) -> Dictionary:
        if self._loader is not None:
            logger.info("Loading dictionary from custom loader")
            dictionary = self._loader()
        else:
            dictionary = self._load_file()
        logger.info("Loaded %d entries", len(dictionary))
        return dictionary

    def _load_file(self) -> Dictionary:
        path_str = str(self.path)
        logger.info("Loading dictionary from %s", path_str)
        if not self.path.exists():
            raise DictionaryLoadError(
                path_str,
                "file not found (run 'ejdict build' to create it)",
            )
        try:
            return Dictionary.load(self.path)
        except UnicodeDecodeError as e:
            raise DictionaryLoadError(path_str, f"invalid UTF-8: {e}") from e
        except json.JSONDecodeError as e:
            raise DictionaryLoadError(path_str, f"invalid JSON: {e}") from e
        except (KeyError, TypeError, ValueError) as e:
            raise DictionaryLoadError(path_str, f"unexpected structure: {e!r}") from e
        except OSError as e:
            raise DictionaryLoadError(path_str, str(e)) from e


_default_store: Optional[DictionaryStore] = None
_default_lock = threading.Lock()


def default_store() -> DictionaryStore:
    """Get the shared store built from the configured dictionary path."""
    global _default_store
    if _default_store is None:
        with _default_lock:
            if _default_store is None:
                _default_store = DictionaryStore(path=cfg.default_dictionary_path())
    return _default_store


def set_default_store(store: Optional[DictionaryStore]) -> None:
    """Replace the shared store. Pass None to rebuild it from config."""
    global _default_store
    with _default_lock:
        _default_store = store
