"""Contact service - the use cases the API and CLI call."""

from collections.abc import Iterable

from contact_analyzer.models import Contact, ContactWithValidation
from contact_analyzer.services.validation import ContactValidator
from contact_analyzer.store import ContactStore


class ContactService:
    """Orchestrates the contact store and the validator.

    The service does no locking of its own; the store guarantees that
    each call sees a consistent snapshot.
    """

    def __init__(self, store: ContactStore, validator: ContactValidator | None = None):
        """Initialize the contact service.

        Args:
            store: Where contacts live
            validator: Rule checker, defaults to the standard rules
        """
        self.store = store
        self.validator = validator or ContactValidator()

    def get_all(self) -> list[Contact]:
        """Return every stored contact."""
        return self.store.find_all()

    def get(self, contact_id: int) -> Contact:
        """Return one contact.

        Raises:
            ContactNotFoundError: If the id is not stored
        """
        return self.store.find_by_id(contact_id)

    def search(self, field: str, value: str) -> list[Contact]:
        """Return contacts whose ``field`` contains ``value``, ignoring case.

        Unknown field names match nothing.
        """
        return self.store.search(field, value)

    def update(self, contact: Contact) -> Contact:
        """Replace a stored contact's fields.

        Args:
            contact: New field values; ``contact.id`` selects the record

        Returns:
            The stored contact, with its original creation time

        Raises:
            ContactNotFoundError: If the id is not stored
        """
        return self.store.update(contact)

    def save_batch(self, contacts: Iterable[Contact]) -> list[Contact]:
        """Store a batch of new contacts and return them with their ids."""
        return self.store.insert_batch(contacts)

    def validate_all(self) -> list[ContactWithValidation]:
        """Validate every stored contact.

        Results follow the order ``get_all`` returns, one per contact.
        """
        return [
            ContactWithValidation(contact=contact, errors=self.validator.validate(contact))
            for contact in self.store.find_all()
        ]
