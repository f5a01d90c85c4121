"""Offset-based pagination used by the document endpoints.

The cursor-based page types live next to the resources that use them
(``WorkspacesPage``, ``FilesPage`` and so on).
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from .base import SnakeModel

T = TypeVar("T")


class Pagination(SnakeModel):
    """Offset/limit parameters for list requests."""

    offset: int | None = Field(None, ge=0, description="Number of items to skip")
    limit: int | None = Field(None, ge=0, description="Maximum number of items to return")

    @classmethod
    def page(cls, page: int, per_page: int) -> Pagination:
        """Return pagination for a 1-based ``page`` of ``per_page`` items."""
        return cls(offset=max(page - 1, 0) * per_page, limit=per_page)

    def to_params(self) -> dict[str, int]:
        return self.to_payload()


class PaginatedResponse(BaseModel, Generic[T]):
    """A bounded slice of a list result with offset metadata."""

    data: list[T]
    total: int = Field(..., ge=0, description="Total number of items available")
    offset: int = Field(..., ge=0)
    limit: int = Field(..., ge=0)

    @property
    def has_more(self) -> bool:
        """Check if there are more pages available."""
        return self.offset + self.limit < self.total

    def next_page(self) -> Pagination | None:
        """Return the parameters for the following page, or ``None`` on the last page."""
        if not self.has_more:
            return None
        return Pagination(offset=self.offset + self.limit, limit=self.limit)
