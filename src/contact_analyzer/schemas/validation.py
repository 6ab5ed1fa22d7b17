"""Validation result schemas."""

from pydantic import BaseModel

from contact_analyzer.models import ContactWithValidation, FieldError
from contact_analyzer.schemas.contact import ContactResponse
from contact_analyzer.schemas.pagination import PageMeta


class FieldErrorResponse(BaseModel):
    """Schema for one rule violation."""

    field: str
    value: str
    message: str
    type: str

    @classmethod
    def from_error(cls, error: FieldError) -> "FieldErrorResponse":
        return cls(**error.to_dict())


class ContactValidationResponse(BaseModel):
    """Schema for a contact and its validation errors."""

    contact: ContactResponse
    errors: list[FieldErrorResponse]
    is_valid: bool

    @classmethod
    def from_result(cls, result: ContactWithValidation) -> "ContactValidationResponse":
        return cls(
            contact=ContactResponse.model_validate(result.contact),
            errors=[FieldErrorResponse.from_error(e) for e in result.errors],
            is_valid=result.is_valid,
        )


class ValidationPage(PageMeta):
    """One page of validation results, with totals over all contacts."""

    data: list[ContactValidationResponse]
    valid: int
    invalid: int
