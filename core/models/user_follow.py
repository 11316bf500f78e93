"""UserFollow model."""

from typing import ClassVar

from django.db import models


class UserFollow(models.Model):
    """Directed follow edge matching the ``follows`` table.

    ``follower`` follows ``followee``. Edges are never updated: following
    inserts a row, unfollowing (or removing a follower) deletes it.
    This model is unmanaged as the database schema is owned by another component.
    """

    follower = models.ForeignKey(
        "core.User",
        on_delete=models.CASCADE,
        related_name="following_edges",
        db_column="following_user_id",
    )
    followee = models.ForeignKey(
        "core.User",
        on_delete=models.CASCADE,
        related_name="follower_edges",
        db_column="followed_user_id",
    )
    followed_at = models.DateTimeField(auto_now_add=True, db_column="created_at")

    class Meta:
        """Django model metadata."""

        db_table = "follows"
        managed = False  # Schema is managed externally
        constraints: ClassVar[list[models.BaseConstraint]] = [
            models.UniqueConstraint(
                fields=["follower", "followee"], name="follows_unique_pair"
            ),
            models.CheckConstraint(
                condition=~models.Q(follower=models.F("followee")),
                name="follows_no_self_follow",
            ),
        ]
        indexes: ClassVar[list[models.Index]] = [
            models.Index(fields=["followee", "-followed_at"], name="follows_followee_idx"),
        ]
        ordering: ClassVar[list[str]] = ["-followed_at", "-id"]

    def __str__(self) -> str:
        """Return string representation of follow relationship."""
        return f"{self.follower_id} follows {self.followee_id}"

    def __repr__(self) -> str:
        """Return detailed representation of follow relationship."""
        return (
            f"<UserFollow(follower={self.follower_id}, "
            f"followee={self.followee_id})>"
        )
