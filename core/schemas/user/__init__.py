"""User-related Pydantic schemas."""

from core.schemas.user.user_summary import UserSummary

__all__ = ["UserSummary"]
