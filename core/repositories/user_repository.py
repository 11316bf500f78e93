"""Repository for user-related database queries."""

from django.db.models import QuerySet

from core.models import User
from core.repositories.errors import translate_database_errors


class UserRepository:
    """Repository for encapsulating user database queries.

    The follow subsystem only needs existence checks and batch lookups;
    users are created and updated by another component.
    """

    @staticmethod
    def user_exists(username: str) -> bool:
        """Check whether a user with this username exists.

        Args:
            username: Username (the user identifier)

        Returns:
            True if the user exists, False otherwise

        Example:
            >>> if not UserRepository.user_exists("alice"):
            ...     print("no such user")
        """
        with translate_database_errors("user_exists"):
            return User.objects.filter(username=username).exists()

    @staticmethod
    def get_users_by_usernames(usernames: list[str]) -> QuerySet[User]:
        """Batch lookup users by their usernames.

        Retrieves multiple users in a single database query. The queryset
        is unordered with respect to ``usernames``.

        Args:
            usernames: Usernames to look up

        Returns:
            QuerySet of User objects matching the provided usernames
        """
        return User.objects.filter(username__in=usernames)
