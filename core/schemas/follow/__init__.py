"""Follow relationship schemas."""

from core.schemas.follow.follow_edge import FollowEdge
from core.schemas.follow.follow_stats import FollowStats
from core.schemas.follow.service_result import ServiceResult

__all__ = ["FollowEdge", "FollowStats", "ServiceResult"]
