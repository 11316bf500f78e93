"""Data access layer for the core app."""

from core.repositories.edge_store import EdgeStore
from core.repositories.follow_repository import FollowRepository
from core.repositories.user_repository import UserRepository

__all__ = ["EdgeStore", "FollowRepository", "UserRepository"]
