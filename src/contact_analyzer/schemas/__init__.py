"""Pydantic schemas for request/response validation."""

from contact_analyzer.schemas.pagination import PageMeta, PageParams
from contact_analyzer.schemas.contact import (
    ContactPage,
    ContactResponse,
    ContactUpdate,
    SearchParams,
    UploadResponse,
)
from contact_analyzer.schemas.validation import (
    ContactValidationResponse,
    FieldErrorResponse,
    ValidationPage,
)

__all__ = [
    "PageMeta",
    "PageParams",
    "ContactPage",
    "ContactResponse",
    "ContactUpdate",
    "SearchParams",
    "UploadResponse",
    "ContactValidationResponse",
    "FieldErrorResponse",
    "ValidationPage",
]
