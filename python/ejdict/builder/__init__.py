"""Dictionary builder module.

Builds the serialized dictionary the runtime loader reads:
- Raw EJDict text -> ordered entries -> one JSON file
"""

from .dictionary import BuildStats, DictionaryBuilder

__all__ = [
    "BuildStats",
    "DictionaryBuilder",
]
