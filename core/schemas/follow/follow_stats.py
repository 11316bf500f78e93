"""Follow statistics schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class FollowStats(BaseSchemaModel):
    """Follower and following counts for a single user.

    The two counts are read independently and may reflect slightly
    different instants under concurrent writes.
    """

    following_count: int = Field(default=0, ge=0)
    followers_count: int = Field(default=0, ge=0)
    degraded: bool = Field(
        default=False,
        description="True when the counts are zeros substituted after a store failure",
    )
