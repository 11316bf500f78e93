"""Exception types and handlers for the social service."""

from core.exceptions.follow_exceptions import (
    AlreadyFollowingError,
    FollowError,
    FollowErrorCode,
    NotFollowingError,
    SelfFollowError,
    UserNotFoundError,
)
from core.exceptions.handlers import custom_exception_handler
from core.exceptions.store_exceptions import (
    ConstraintViolationError,
    EdgeStoreError,
    StoreUnavailableError,
)

__all__ = [
    "AlreadyFollowingError",
    "ConstraintViolationError",
    "EdgeStoreError",
    "FollowError",
    "FollowErrorCode",
    "NotFollowingError",
    "SelfFollowError",
    "StoreUnavailableError",
    "UserNotFoundError",
    "custom_exception_handler",
]
