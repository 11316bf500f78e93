"""Follow edge schema."""

from datetime import datetime

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class FollowEdge(BaseSchemaModel):
    """A directed follow relationship: ``follower`` follows ``followee``."""

    follower: str = Field(..., min_length=1, description="Username of the follower")
    followee: str = Field(..., min_length=1, description="Username being followed")
    created_at: datetime = Field(..., description="When the edge was created")
