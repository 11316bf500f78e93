"""Django ORM implementation of the follow edge store."""

from django.db import IntegrityError, transaction

from core.exceptions import ConstraintViolationError
from core.models import UserFollow
from core.pagination import Pagination
from core.repositories.edge_store import EdgeStore
from core.repositories.errors import translate_database_errors
from core.schemas.follow import FollowEdge

RECENT_FIRST = ("-followed_at", "-id")


class FollowRepository(EdgeStore):
    """Edge store backed by the ``follows`` table.

    Each mutation runs in its own atomic block and touches a single row.
    """

    def __init__(self, model: type[UserFollow] = UserFollow) -> None:
        """Initialize the repository.

        Args:
            model: Django model mapped to the follows table
        """
        self.model = model

    def exists(self, follower_id: str, followee_id: str) -> bool:
        with translate_database_errors("exists"):
            return self.model.objects.filter(
                follower_id=follower_id, followee_id=followee_id
            ).exists()

    def insert(self, follower_id: str, followee_id: str) -> FollowEdge:
        with translate_database_errors("insert"):
            try:
                with transaction.atomic():
                    row = self.model.objects.create(
                        follower_id=follower_id, followee_id=followee_id
                    )
            except IntegrityError as e:
                raise ConstraintViolationError(follower_id, followee_id) from e
        return self._to_edge(row)

    def delete(self, follower_id: str, followee_id: str) -> bool:
        with translate_database_errors("delete"), transaction.atomic():
            deleted, _ = self.model.objects.filter(
                follower_id=follower_id, followee_id=followee_id
            ).delete()
        return deleted > 0

    def scan_by_followee(
        self, followee_id: str, pagination: Pagination
    ) -> tuple[list[str], int]:
        return self._scan(
            "scan_by_followee",
            {"followee_id": followee_id},
            "follower_id",
            pagination,
        )

    def scan_by_follower(
        self, follower_id: str, pagination: Pagination
    ) -> tuple[list[str], int]:
        return self._scan(
            "scan_by_follower",
            {"follower_id": follower_id},
            "followee_id",
            pagination,
        )

    def count_by_followee(self, followee_id: str) -> int:
        with translate_database_errors("count_by_followee"):
            return self.model.objects.filter(followee_id=followee_id).count()

    def count_by_follower(self, follower_id: str) -> int:
        with translate_database_errors("count_by_follower"):
            return self.model.objects.filter(follower_id=follower_id).count()

    def mutual(self, user_id: str, other_user_id: str) -> list[str]:
        with translate_database_errors("mutual"):
            followed_by_other = self.model.objects.filter(
                follower_id=other_user_id
            ).values("followee_id")
            return list(
                self.model.objects.filter(
                    follower_id=user_id, followee_id__in=followed_by_other
                )
                .order_by(*RECENT_FIRST)
                .values_list("followee_id", flat=True)
            )

    def _scan(
        self,
        operation: str,
        filters: dict[str, str],
        id_column: str,
        pagination: Pagination,
    ) -> tuple[list[str], int]:
        """Return one recency-ordered page of ``id_column`` plus the total."""
        with translate_database_errors(operation):
            queryset = self.model.objects.filter(**filters)
            total = queryset.count()
            ids = list(
                queryset.order_by(*RECENT_FIRST).values_list(id_column, flat=True)[
                    pagination.offset : pagination.offset + pagination.limit
                ]
            )
        return ids, total

    @staticmethod
    def _to_edge(row: UserFollow) -> FollowEdge:
        return FollowEdge(
            follower=row.follower_id,
            followee=row.followee_id,
            created_at=row.followed_at,
        )
