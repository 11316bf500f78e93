"""Page/limit pagination shared by every paginated follow query."""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

from core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from core.schemas.pagination import PaginatedResult

T = TypeVar("T")


@dataclass(frozen=True)
class Pagination:
    """A validated page/limit pair.

    Build instances with :meth:`clamped` (or :meth:`from_query_params`) so
    that ``page >= 1`` and ``1 <= limit <= max_limit`` always hold.
    """

    page: int
    limit: int

    @classmethod
    def clamped(
        cls,
        page: int | None = None,
        limit: int | None = None,
        max_limit: int = MAX_PAGE_SIZE,
    ) -> "Pagination":
        """Clamp raw inputs into range.

        Missing or zero values fall back to the defaults (page 1, limit 10).

        Args:
            page: Requested page number (1-based)
            limit: Requested page size
            max_limit: Upper bound for the page size

        Returns:
            Pagination with page >= 1 and 1 <= limit <= max_limit
        """
        return cls(
            page=max(1, page or DEFAULT_PAGE),
            limit=min(max_limit, max(1, limit or DEFAULT_PAGE_SIZE)),
        )

    @classmethod
    def from_query_params(cls, query_params) -> "Pagination":
        """Build from ``page``/``limit`` query parameters.

        Raises:
            ValueError: If either parameter is present but not an integer
        """
        page = query_params.get("page")
        limit = query_params.get("limit")
        return cls.clamped(
            page=int(page) if page not in (None, "") else None,
            limit=int(limit) if limit not in (None, "") else None,
        )

    @property
    def offset(self) -> int:
        """Number of rows skipped before this page."""
        return (self.page - 1) * self.limit


def build_paginated_result(
    data: Sequence[T],
    total: int,
    pagination: Pagination,
    degraded: bool = False,
) -> PaginatedResult[T]:
    """Wrap one page of rows with its navigation metadata.

    Args:
        data: Rows of the current page
        total: Total number of rows across all pages
        pagination: The pagination used to fetch ``data``
        degraded: Whether the page was produced after a store failure

    Returns:
        PaginatedResult with totalPages/hasNext/hasPrev derived from ``total``
    """
    total_pages = math.ceil(total / pagination.limit)
    return PaginatedResult(
        data=list(data),
        total=total,
        page=pagination.page,
        limit=pagination.limit,
        total_pages=total_pages,
        has_next=pagination.page < total_pages,
        has_prev=pagination.page > 1,
        degraded=degraded,
    )
