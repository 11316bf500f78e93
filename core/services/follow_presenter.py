"""Attach user profiles to the identifiers returned by the follow service."""

from collections.abc import Callable, Iterable

import structlog
from django.db.models import QuerySet

from core.models import User
from core.repositories import UserRepository
from core.schemas.pagination import PaginatedResult
from core.schemas.user import UserSummary

logger = structlog.get_logger(__name__)


class FollowPresenter:
    """Turns usernames into public user summaries for API responses.

    Usernames that no longer resolve to a user (for example, deleted
    accounts whose edges have not been cleaned up yet) are dropped.
    """

    def __init__(
        self,
        lookup_users: Callable[[list[str]], QuerySet[User] | Iterable[User]] = (
            UserRepository.get_users_by_usernames
        ),
    ) -> None:
        """Initialize the presenter.

        Args:
            lookup_users: Batch lookup returning users for a list of usernames
        """
        self.lookup_users = lookup_users

    def present_users(self, usernames: list[str]) -> list[UserSummary]:
        """Resolve usernames to summaries, preserving the input order."""
        if not usernames:
            return []

        users = {user.username: user for user in self.lookup_users(usernames)}
        missing = [name for name in usernames if name not in users]
        if missing:
            logger.debug("Dropping unresolved usernames", missing=missing)

        return [
            UserSummary.model_validate(users[name])
            for name in usernames
            if name in users
        ]

    def present_page(self, page: PaginatedResult[str]) -> PaginatedResult[UserSummary]:
        """Resolve one page of usernames, keeping the store's page metadata."""
        return PaginatedResult[UserSummary](
            **page.model_dump(exclude={"data"}),
            data=self.present_users(page.data),
        )


# Global follow presenter instance
follow_presenter = FollowPresenter()
