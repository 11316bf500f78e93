"""Business rule violations raised inside the follow service."""

from enum import Enum


class FollowErrorCode(str, Enum):
    """Machine-readable failure codes carried by service results."""

    SELF_FOLLOW = "self_follow"
    USER_NOT_FOUND = "user_not_found"
    ALREADY_FOLLOWING = "already_following"
    NOT_FOLLOWING = "not_following"
    CONSTRAINT_VIOLATION = "constraint_violation"
    STORE_UNAVAILABLE = "store_unavailable"


class FollowError(Exception):
    """Base exception for follow precondition failures.

    These never escape the follow service; they are converted into
    unsuccessful results carrying ``code`` and the exception message.
    """

    code: FollowErrorCode

    def __init__(self, message: str):
        """Initialize follow error.

        Args:
            message: Human-readable description of the violated rule
        """
        super().__init__(message)


class SelfFollowError(FollowError):
    """A user attempted to follow themselves."""

    code = FollowErrorCode.SELF_FOLLOW

    def __init__(self, user_id: str):
        """Initialize self-follow error.

        Args:
            user_id: The user that tried to follow themselves
        """
        self.user_id = user_id
        super().__init__("Users cannot follow themselves")


class UserNotFoundError(FollowError):
    """One side of a follow request does not resolve to a user."""

    code = FollowErrorCode.USER_NOT_FOUND

    def __init__(self, user_id: str, side: str):
        """Initialize user not found error.

        Args:
            user_id: Identifier that did not resolve
            side: Either ``"follower"`` or ``"followee"``
        """
        self.user_id = user_id
        self.side = side
        if side == "follower":
            message = f"Following user '{user_id}' not found"
        else:
            message = f"User to follow '{user_id}' not found"
        super().__init__(message)


class AlreadyFollowingError(FollowError):
    """The follow edge already exists."""

    code = FollowErrorCode.ALREADY_FOLLOWING

    def __init__(self, follower_id: str, followee_id: str):
        """Initialize already following error.

        Args:
            follower_id: The following user
            followee_id: The followed user
        """
        self.follower_id = follower_id
        self.followee_id = followee_id
        super().__init__(f"'{follower_id}' already follows '{followee_id}'")


class NotFollowingError(FollowError):
    """The follow edge to remove does not exist."""

    code = FollowErrorCode.NOT_FOLLOWING

    def __init__(self, follower_id: str, followee_id: str):
        """Initialize not following error.

        Args:
            follower_id: The (supposed) following user
            followee_id: The (supposed) followed user
        """
        self.follower_id = follower_id
        self.followee_id = followee_id
        super().__init__(
            f"Follow relationship from '{follower_id}' to '{followee_id}' does not exist"
        )
