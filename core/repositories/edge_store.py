"""Abstract storage contract for directed follow edges."""

from abc import ABC, abstractmethod

from core.pagination import Pagination
from core.schemas.follow import FollowEdge


class EdgeStore(ABC):
    """Persistence operations the follow service depends on.

    Implementations store directed edges ``follower -> followee``. All scans
    return the most recent edge first. Infrastructure failures are raised as
    :class:`~core.exceptions.StoreUnavailableError`.
    """

    @abstractmethod
    def exists(self, follower_id: str, followee_id: str) -> bool:
        """Return True iff the edge ``follower_id -> followee_id`` is present."""

    @abstractmethod
    def insert(self, follower_id: str, followee_id: str) -> FollowEdge:
        """Insert an edge, timestamped now.

        Raises:
            ConstraintViolationError: If the edge already exists or is a self-edge
        """

    @abstractmethod
    def delete(self, follower_id: str, followee_id: str) -> bool:
        """Delete an edge; return whether a row was removed."""

    @abstractmethod
    def scan_by_followee(
        self, followee_id: str, pagination: Pagination
    ) -> tuple[list[str], int]:
        """Return one page of ``followee_id``'s followers and the total count."""

    @abstractmethod
    def scan_by_follower(
        self, follower_id: str, pagination: Pagination
    ) -> tuple[list[str], int]:
        """Return one page of the users ``follower_id`` follows and the total count."""

    @abstractmethod
    def count_by_followee(self, followee_id: str) -> int:
        """Return how many users follow ``followee_id``."""

    @abstractmethod
    def count_by_follower(self, follower_id: str) -> int:
        """Return how many users ``follower_id`` follows."""

    @abstractmethod
    def mutual(self, user_id: str, other_user_id: str) -> list[str]:
        """Return users followed by both, ordered by ``user_id``'s edge recency."""
