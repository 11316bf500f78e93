"""Schemas for the core app."""

from core.schemas.follow import FollowEdge, FollowStats, ServiceResult
from core.schemas.health import (
    DependencyHealth,
    LivenessResponse,
    ReadinessResponse,
)
from core.schemas.pagination import PaginatedResult
from core.schemas.user import UserSummary

__all__ = [
    "DependencyHealth",
    "FollowEdge",
    "FollowStats",
    "LivenessResponse",
    "PaginatedResult",
    "ReadinessResponse",
    "ServiceResult",
    "UserSummary",
]
