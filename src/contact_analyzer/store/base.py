"""Store contract. Implemented by the in-memory store; a persistent one can follow."""

from collections.abc import Iterable
from typing import Protocol

from contact_analyzer.models import Contact


SEARCHABLE_FIELDS = ("client_key", "name", "email", "phone")


class ContactNotFoundError(LookupError):
    """Raised when an operation targets an id that is not stored."""

    def __init__(self, contact_id: int):
        super().__init__(f"Contact {contact_id} not found")
        self.contact_id = contact_id


class ContactStore(Protocol):
    """Holds the authoritative set of contacts, keyed by id."""

    def insert(self, contact: Contact) -> Contact:
        """Store a contact, assigning an id and timestamps when it is new."""
        ...

    def insert_batch(self, contacts: Iterable[Contact]) -> list[Contact]:
        """Insert every contact in order, as one write."""
        ...

    def find_all(self) -> list[Contact]:
        """Return every stored contact. Callers must not rely on the order."""
        ...

    def find_by_id(self, contact_id: int) -> Contact:
        """Return the contact with the given id. Raises ContactNotFoundError."""
        ...

    def update(self, contact: Contact) -> Contact:
        """Replace a stored contact's fields. Raises ContactNotFoundError."""
        ...

    def delete(self, contact_id: int) -> None:
        """Remove a stored contact. Raises ContactNotFoundError."""
        ...

    def search(self, field: str, value: str) -> list[Contact]:
        """Case-insensitive substring match on one of SEARCHABLE_FIELDS."""
        ...
