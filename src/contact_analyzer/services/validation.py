"""Validation rules - checks one contact against the business rules."""

import re

from contact_analyzer.models import Contact, ErrorKind, FieldError


ALLOWED_EMAIL_DOMAINS = (
    "gmail.com",
    "yahoo.com",
    "hotmail.com",
    "outlook.com",
    "live.com",
    "icloud.com",
    "protonmail.com",
)

# Chiapas "ladas" (area codes)
CHIAPAS_AREA_CODES = ("961", "962", "963", "964", "965", "966", "967", "968", "994")

PHONE_LENGTH = 10

CLIENT_KEY_PATTERN = re.compile(r"[0-9]+")
EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
NON_DIGIT_PATTERN = re.compile(r"[^0-9]")

NAME_PUNCTUATION = frozenset("'.")


class ContactValidator:
    """Checks contacts against the client key, name, email and phone rules.

    Every field is checked independently and the errors are returned
    in field order. Within a field, the first failing rule wins.
    """

    def __init__(
        self,
        email_domains: tuple[str, ...] = ALLOWED_EMAIL_DOMAINS,
        area_codes: tuple[str, ...] = CHIAPAS_AREA_CODES,
    ):
        self.email_domains = frozenset(d.lower() for d in email_domains)
        self.area_codes = area_codes

    def validate(self, contact: Contact) -> list[FieldError]:
        """Return every rule violation for a contact (empty if it is valid)."""
        return [
            *self.validate_client_key(contact.client_key),
            *self.validate_name(contact.name),
            *self.validate_email(contact.email),
            *self.validate_phone(contact.phone),
        ]

    def validate_client_key(self, client_key: str) -> list[FieldError]:
        if not client_key:
            return [_error("client_key", client_key, "Client key is required", ErrorKind.REQUIRED)]

        if not CLIENT_KEY_PATTERN.fullmatch(client_key):
            return [
                _error(
                    "client_key",
                    client_key,
                    "Client key must contain only digits",
                    ErrorKind.INVALID_FORMAT,
                )
            ]

        return []

    def validate_name(self, name: str) -> list[FieldError]:
        if not name:
            return [_error("name", name, "Name is required", ErrorKind.REQUIRED)]

        for char in name:
            if not (char.isalpha() or char.isspace() or char in NAME_PUNCTUATION):
                return [
                    _error(
                        "name",
                        name,
                        "Name must contain only letters, spaces, apostrophes and periods",
                        ErrorKind.INVALID_CHARACTER,
                    )
                ]

        return []

    def validate_email(self, email: str) -> list[FieldError]:
        if not email:
            return [_error("email", email, "Email is required", ErrorKind.REQUIRED)]

        if not EMAIL_PATTERN.fullmatch(email):
            return [_error("email", email, "Email format is not valid", ErrorKind.INVALID_FORMAT)]

        _, _, domain = email.partition("@")
        if domain.lower() not in self.email_domains:
            allowed = ", ".join(sorted(self.email_domains))
            return [
                _error(
                    "email",
                    email,
                    f"Email domain is not recognized (use one of: {allowed})",
                    ErrorKind.INVALID_DOMAIN,
                )
            ]

        return []

    def validate_phone(self, phone: str) -> list[FieldError]:
        if not phone:
            return [_error("phone", phone, "Phone is required", ErrorKind.REQUIRED)]

        if any(char.isalpha() for char in phone):
            return [
                _error("phone", phone, "Phone must not contain letters", ErrorKind.INVALID_CHARACTER)
            ]

        digits = NON_DIGIT_PATTERN.sub("", phone)
        if len(digits) != PHONE_LENGTH:
            return [
                _error(
                    "phone",
                    phone,
                    f"Phone must have exactly {PHONE_LENGTH} digits",
                    ErrorKind.INVALID_LENGTH,
                )
            ]

        if digits[:3] not in self.area_codes:
            return [
                _error(
                    "phone",
                    phone,
                    f"Area code must be from Chiapas ({', '.join(self.area_codes)})",
                    ErrorKind.INVALID_AREA_CODE,
                )
            ]

        return []


def _error(field: str, value: str, message: str, kind: ErrorKind) -> FieldError:
    return FieldError(field=field, value=value, message=message, kind=kind)
