"""Generic paginated result schema."""

from typing import Generic, TypeVar

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel

T = TypeVar("T")


class PaginatedResult(BaseSchemaModel, Generic[T]):
    """One page of results plus navigation metadata."""

    data: list[T] = Field(default_factory=list, description="Items on this page")
    total: int = Field(..., ge=0, description="Total items across all pages")
    page: int = Field(..., ge=1, description="Current page number (1-based)")
    limit: int = Field(..., ge=1, le=100, description="Page size")
    total_pages: int = Field(..., ge=0, description="Number of pages")
    has_next: bool = Field(..., description="Whether a later page exists")
    has_prev: bool = Field(..., description="Whether an earlier page exists")
    degraded: bool = Field(
        default=False,
        description="True when the page is a fallback after a store failure",
    )
