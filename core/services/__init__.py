"""Services for the core app."""

from core.services.follow_presenter import FollowPresenter, follow_presenter
from core.services.follow_service import FollowService, follow_service
from core.services.health_service import HealthService, health_service

__all__ = [
    "FollowPresenter",
    "FollowService",
    "HealthService",
    "follow_presenter",
    "follow_service",
    "health_service",
]
