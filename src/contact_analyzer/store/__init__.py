"""Contact storage."""

from contact_analyzer.store.base import (
    SEARCHABLE_FIELDS,
    ContactNotFoundError,
    ContactStore,
)
from contact_analyzer.store.memory import InMemoryContactStore, ReadWriteLock

__all__ = [
    "SEARCHABLE_FIELDS",
    "ContactNotFoundError",
    "ContactStore",
    "InMemoryContactStore",
    "ReadWriteLock",
]
