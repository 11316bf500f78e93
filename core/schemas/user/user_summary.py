"""Public user summary attached to follow query results."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class UserSummary(BaseSchemaModel):
    """Public profile fields of a user, as returned by follow listings."""

    username: str = Field(..., min_length=1, max_length=50, description="Username")
    full_name: str = Field(..., description="Display name, falling back to username")
    bio: str = Field(default="", description="User biography")
    profile_picture: str = Field(default="", description="Profile picture URL")
