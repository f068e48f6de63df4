"""Error kinds raised by ejdict.

Every error carries the offending value as an attribute so callers can
branch on type and payload instead of parsing messages.
"""

from typing import Optional


class EjdictError(Exception):
    """Base class for all ejdict errors."""


class NotFoundError(EjdictError):
    """No entry matched the pattern."""

    def __init__(self, pattern: str):
        self.pattern = pattern
        super().__init__(f"not found from English-Japanese Dictionary: {pattern}")


class InvalidSearchModeName(EjdictError):
    """A search mode name is not one of exact, lower, fuzzy."""

    def __init__(self, given: str):
        self.given = given
        super().__init__(
            "Invalid argument: The argument isn't convertible to SearchMode. "
            f"argument: {given}"
        )


class EntryParseError(EjdictError):
    """A raw dictionary line is not '<headwords>\\t<meaning>'."""

    def __init__(self, line: str, line_number: Optional[int] = None):
        self.line = line
        self.line_number = line_number
        where = f" (line {line_number})" if line_number is not None else ""
        super().__init__(f"Malformed dictionary line{where}: {line!r}")


class DictionaryLoadError(EjdictError):
    """The serialized dictionary is missing or corrupt."""

    def __init__(self, path: Optional[str], reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load dictionary from {path}: {reason}")
