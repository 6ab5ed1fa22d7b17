"""Contact model - the records being cleaned up."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class ErrorKind(str, Enum):
    """Kinds of rule violations a contact field can have."""

    REQUIRED = "REQUIRED"
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_CHARACTER = "INVALID_CHARACTER"
    INVALID_LENGTH = "INVALID_LENGTH"
    INVALID_DOMAIN = "INVALID_DOMAIN"
    INVALID_AREA_CODE = "INVALID_AREA_CODE"


@dataclass
class Contact:
    """A contact record.

    ``id`` is assigned by the store; 0 means the contact has not been
    stored yet. Timestamps are set by the store as well.
    """

    client_key: str = ""
    name: str = ""
    email: str = ""
    phone: str = ""
    id: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __repr__(self) -> str:
        return f"<Contact {self.id} {self.client_key} {self.name!r}>"

    @property
    def is_stored(self) -> bool:
        return self.id != 0


@dataclass(frozen=True)
class FieldError:
    """One rule violation on one contact field."""

    field: str
    value: str
    message: str
    kind: ErrorKind

    def to_dict(self) -> dict:
        return {
            "field": self.field,
            "value": self.value,
            "message": self.message,
            "type": self.kind.value,
        }


@dataclass
class ContactWithValidation:
    """A contact snapshot paired with its own validation errors."""

    contact: Contact
    errors: list[FieldError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors
