"""Pagination parameters and page metadata."""

import math
from collections.abc import Sequence
from typing import TypeVar

from pydantic import BaseModel, Field


DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 100

T = TypeVar("T")


class PageParams(BaseModel):
    """Query parameters selecting a page of results."""

    page: int = Field(default=1, ge=1, description="1-based page number")
    page_size: int = Field(
        default=DEFAULT_PAGE_SIZE,
        ge=1,
        le=MAX_PAGE_SIZE,
        description="Items per page",
    )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    def slice(self, items: Sequence[T]) -> list[T]:
        """Return the items on this page (empty past the last page)."""
        return list(items[self.offset:self.offset + self.page_size])

    def meta(self, total: int) -> dict:
        return {
            "page": self.page,
            "page_size": self.page_size,
            "total": total,
            "total_pages": math.ceil(total / self.page_size),
        }


class PageMeta(BaseModel):
    """Fields shared by every paginated response."""

    page: int
    page_size: int
    total: int
    total_pages: int
