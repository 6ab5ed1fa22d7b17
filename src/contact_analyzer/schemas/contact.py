"""Contact schemas for API validation."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from contact_analyzer.schemas.pagination import PageMeta


class ContactUpdate(BaseModel):
    """Schema for replacing a contact's fields.

    Every field is required; empty strings are accepted and show up
    as REQUIRED errors on validation.
    """

    client_key: str = Field(
        ...,
        description="Numeric client key from the owner's system",
        examples=["10234"],
    )
    name: str = Field(
        ...,
        description="Contact display name",
        examples=["Ana Pérez"],
    )
    email: str = Field(
        ...,
        description="Email address",
        examples=["ana.perez@gmail.com"],
    )
    phone: str = Field(
        ...,
        description="10-digit phone number with a Chiapas area code",
        examples=["9611234567"],
    )


class ContactResponse(BaseModel):
    """Schema for contact response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    client_key: str
    name: str
    email: str
    phone: str
    created_at: datetime | None
    updated_at: datetime | None


class ContactPage(PageMeta):
    """One page of contacts."""

    data: list[ContactResponse]


class SearchParams(BaseModel):
    """Query parameters for contact search."""

    field: str = Field(
        ...,
        min_length=1,
        description="client_key, name, email or phone",
        examples=["name"],
    )
    value: str = Field(
        ...,
        min_length=1,
        description="Case-insensitive text to look for",
        examples=["ana"],
    )


class UploadResponse(BaseModel):
    """Schema for spreadsheet upload response."""

    message: str
    count: int
