"""Result envelope returned by follow service write operations."""

from typing import Generic, TypeVar

from pydantic import Field

from core.exceptions.follow_exceptions import FollowErrorCode
from core.schemas.base_schema_model import BaseSchemaModel

T = TypeVar("T")


class ServiceResult(BaseSchemaModel, Generic[T]):
    """Outcome of a follow operation.

    Business rule violations produce ``success=False`` with an ``error``
    code instead of an exception. ``degraded`` marks results produced by the
    fail-soft policy after an infrastructure failure.
    """

    success: bool
    message: str
    data: T | None = None
    error: FollowErrorCode | None = None
    degraded: bool = False

    @classmethod
    def ok(cls, message: str, data: T) -> "ServiceResult[T]":
        """Build a successful result."""
        return cls(success=True, message=message, data=data)

    @classmethod
    def fail(
        cls,
        message: str,
        error: FollowErrorCode,
        data: T | None = None,
        degraded: bool = False,
    ) -> "ServiceResult[T]":
        """Build an unsuccessful result."""
        return cls(
            success=False,
            message=message,
            data=data,
            error=error,
            degraded=degraded,
        )
