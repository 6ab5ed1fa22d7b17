"""In-memory implementation of ContactStore (no persistence)."""

import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import replace
from datetime import datetime, timezone

from contact_analyzer.models import Contact
from contact_analyzer.store.base import SEARCHABLE_FIELDS, ContactNotFoundError


def _now() -> datetime:
    return datetime.now(timezone.utc)


class ReadWriteLock:
    """Many concurrent readers or one writer.

    Waiting writers block new readers so a steady stream of reads
    cannot starve an import.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class InMemoryContactStore:
    """Stores contacts in a dict keyed by id.

    Records are copied on the way in and on the way out, so callers
    never hold a reference to stored state.
    """

    def __init__(self) -> None:
        self._contacts: dict[int, Contact] = {}
        self._next_id = 1
        self._lock = ReadWriteLock()

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._contacts)

    def insert(self, contact: Contact) -> Contact:
        with self._lock.write():
            return self._insert(contact)

    def insert_batch(self, contacts: Iterable[Contact]) -> list[Contact]:
        with self._lock.write():
            return [self._insert(contact) for contact in contacts]

    def find_all(self) -> list[Contact]:
        with self._lock.read():
            return [replace(c) for c in self._contacts.values()]

    def find_by_id(self, contact_id: int) -> Contact:
        with self._lock.read():
            contact = self._contacts.get(contact_id)
            if contact is None:
                raise ContactNotFoundError(contact_id)
            return replace(contact)

    def update(self, contact: Contact) -> Contact:
        with self._lock.write():
            existing = self._contacts.get(contact.id)
            if existing is None:
                raise ContactNotFoundError(contact.id)

            stored = replace(
                contact,
                created_at=existing.created_at,
                updated_at=_now(),
            )
            self._contacts[stored.id] = stored
            return replace(stored)

    def delete(self, contact_id: int) -> None:
        with self._lock.write():
            if contact_id not in self._contacts:
                raise ContactNotFoundError(contact_id)
            del self._contacts[contact_id]

    def search(self, field: str, value: str) -> list[Contact]:
        if field not in SEARCHABLE_FIELDS:
            return []

        needle = value.lower()
        with self._lock.read():
            return [
                replace(c)
                for c in self._contacts.values()
                if needle in getattr(c, field).lower()
            ]

    def _insert(self, contact: Contact) -> Contact:
        """Insert without locking. Caller holds the write lock."""
        now = _now()
        stored = replace(contact, updated_at=now)

        if not stored.is_stored:
            stored.id = self._next_id
            stored.created_at = now
        elif stored.created_at is None:
            stored.created_at = now

        # Explicit ids still advance the counter so it never hands one out twice.
        self._next_id = max(self._next_id, stored.id + 1)

        self._contacts[stored.id] = stored
        return replace(stored)
