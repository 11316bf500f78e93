"""Pagination schemas."""

from core.schemas.pagination.paginated_result import PaginatedResult

__all__ = ["PaginatedResult"]
