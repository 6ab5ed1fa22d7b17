"""Domain models for the contact analyzer."""

from contact_analyzer.models.contact import (
    Contact,
    ContactWithValidation,
    ErrorKind,
    FieldError,
)

__all__ = [
    "Contact",
    "ContactWithValidation",
    "ErrorKind",
    "FieldError",
]
