"""Follow relationship business logic.

This module provides the FollowService class, the only place where follow
rules live: self-follow and duplicate-edge checks, follower/following
listings, statistics, mutual follows and two-hop follow suggestions.
"""

from collections.abc import Iterator
from functools import partial
from itertools import islice
from typing import Protocol

from django.conf import settings

import structlog

from core.constants import (
    DEFAULT_SUGGESTION_LIMIT,
    SUGGESTION_BRANCH_LIMIT,
    SUGGESTION_FRONTIER_LIMIT,
)
from core.exceptions import (
    AlreadyFollowingError,
    ConstraintViolationError,
    FollowError,
    FollowErrorCode,
    NotFollowingError,
    SelfFollowError,
    StoreUnavailableError,
    UserNotFoundError,
)
from core.pagination import Pagination, build_paginated_result
from core.repositories import EdgeStore, FollowRepository, UserRepository
from core.schemas.follow import FollowEdge, FollowStats, ServiceResult
from core.schemas.pagination import PaginatedResult
from core.services.concurrency import run_concurrently

logger = structlog.get_logger(__name__)


class UserLookup(Protocol):
    """Resolves whether a user identifier refers to an existing user."""

    def user_exists(self, username: str) -> bool: ...


class FollowService:
    """Service for follow relationship business logic.

    Collaborators are injected at construction. With ``fail_soft`` enabled,
    store failures are logged and turned into unsuccessful results, empty
    values or zero counts marked ``degraded``; with it disabled they
    propagate as :class:`StoreUnavailableError`. Business rule violations
    are always returned as unsuccessful results.
    """

    def __init__(
        self,
        edge_store: EdgeStore,
        user_lookup: UserLookup,
        fail_soft: bool = True,
        concurrent_reads: bool = False,
        frontier_limit: int = SUGGESTION_FRONTIER_LIMIT,
        branch_limit: int = SUGGESTION_BRANCH_LIMIT,
    ) -> None:
        """Initialize the follow service.

        Args:
            edge_store: Storage for follow edges
            user_lookup: Existence check for user identifiers
            fail_soft: Degrade instead of raising on store failures
            concurrent_reads: Issue independent count queries in parallel
            frontier_limit: Followees of the requester expanded by suggestions
            branch_limit: Followees read per expanded user
        """
        self.edge_store = edge_store
        self.user_lookup = user_lookup
        self.fail_soft = fail_soft
        self.concurrent_reads = concurrent_reads
        self.frontier_limit = frontier_limit
        self.branch_limit = branch_limit

    def follow_user(
        self, follower_id: str, followee_id: str
    ) -> ServiceResult[FollowEdge]:
        """Create the edge ``follower_id -> followee_id``.

        Preconditions are checked in order and the first failure is returned:
        self-follow, unknown follower, unknown followee, existing edge.

        Args:
            follower_id: User who follows
            followee_id: User to be followed

        Returns:
            ServiceResult carrying the created FollowEdge on success.
        """
        try:
            self._check_can_follow(follower_id, followee_id)
            edge = self.edge_store.insert(follower_id, followee_id)
        except FollowError as e:
            return self._rejected("follow_user", e)
        except ConstraintViolationError as e:
            # Lost a race with a concurrent follow of the same pair
            logger.warning(
                "Follow insert rejected by store constraint",
                follower_id=follower_id,
                followee_id=followee_id,
            )
            return ServiceResult.fail(str(e), FollowErrorCode.CONSTRAINT_VIOLATION)
        except StoreUnavailableError as e:
            self._degrade("follow_user", e, follower_id=follower_id, followee_id=followee_id)
            return ServiceResult.fail(
                "An error occurred while following the user.",
                FollowErrorCode.STORE_UNAVAILABLE,
                degraded=True,
            )

        logger.info("User followed", follower_id=follower_id, followee_id=followee_id)
        return ServiceResult.ok("Successfully followed the user.", edge)

    def unfollow_user(self, follower_id: str, followee_id: str) -> ServiceResult[bool]:
        """Remove the edge ``follower_id -> followee_id``."""
        return self._remove_edge(
            "unfollow_user",
            follower_id,
            followee_id,
            success_message="Successfully unfollowed the user.",
            failure_message="An error occurred while unfollowing the user.",
        )

    def remove_follower(self, user_id: str, follower_id: str) -> ServiceResult[bool]:
        """Remove ``follower_id`` from ``user_id``'s followers.

        This is the edge ``follower_id -> user_id`` seen from the followee's
        side; the effect is identical to ``unfollow_user(follower_id, user_id)``.
        """
        return self._remove_edge(
            "remove_follower",
            follower_id,
            user_id,
            success_message="Successfully removed the follower.",
            failure_message="An error occurred while removing the follower.",
        )

    def is_following(self, follower_id: str, followee_id: str) -> bool:
        """Check whether ``follower_id`` follows ``followee_id``.

        Returns False when the store fails and fail-soft is enabled.
        """
        try:
            return self.edge_store.exists(follower_id, followee_id)
        except StoreUnavailableError as e:
            self._degrade("is_following", e, follower_id=follower_id, followee_id=followee_id)
            return False

    def get_followers(
        self, user_id: str, pagination: Pagination | None = None
    ) -> PaginatedResult[str]:
        """Page through the users following ``user_id``, most recent first."""
        pagination = pagination or Pagination.clamped()
        try:
            ids, total = self.edge_store.scan_by_followee(user_id, pagination)
        except StoreUnavailableError as e:
            self._degrade("get_followers", e, user_id=user_id)
            return build_paginated_result([], 0, pagination, degraded=True)
        return build_paginated_result(ids, total, pagination)

    def get_following(
        self, user_id: str, pagination: Pagination | None = None
    ) -> PaginatedResult[str]:
        """Page through the users ``user_id`` follows, most recent first."""
        pagination = pagination or Pagination.clamped()
        try:
            ids, total = self.edge_store.scan_by_follower(user_id, pagination)
        except StoreUnavailableError as e:
            self._degrade("get_following", e, user_id=user_id)
            return build_paginated_result([], 0, pagination, degraded=True)
        return build_paginated_result(ids, total, pagination)

    def get_follow_stats(self, user_id: str) -> FollowStats:
        """Count who ``user_id`` follows and who follows them.

        The two counts are independent reads and may be issued concurrently;
        no snapshot consistency between them is attempted.
        """
        count_following = partial(self.edge_store.count_by_follower, user_id)
        count_followers = partial(self.edge_store.count_by_followee, user_id)
        try:
            if self.concurrent_reads:
                following, followers = run_concurrently(count_following, count_followers)
            else:
                following, followers = count_following(), count_followers()
        except StoreUnavailableError as e:
            self._degrade("get_follow_stats", e, user_id=user_id)
            return FollowStats(degraded=True)
        return FollowStats(following_count=following, followers_count=followers)

    def get_mutual_follows(self, user_id: str, other_user_id: str) -> list[str]:
        """Return users that both users follow.

        This is not "the two users follow each other"; it is the
        intersection of their followees, ordered by ``user_id``'s edge
        recency.
        """
        try:
            return self.edge_store.mutual(user_id, other_user_id)
        except StoreUnavailableError as e:
            self._degrade(
                "get_mutual_follows", e, user_id=user_id, other_user_id=other_user_id
            )
            return []

    def get_follow_suggestions(
        self, user_id: str, limit: int = DEFAULT_SUGGESTION_LIMIT
    ) -> list[str]:
        """Suggest users followed by the people ``user_id`` follows.

        Candidates are taken in discovery order and never include
        ``user_id`` or anyone it already follows. Traversal stops as soon as
        ``limit`` suggestions are found. If the store fails part way, the
        suggestions found so far are returned.

        Args:
            user_id: User to compute suggestions for
            limit: Maximum number of suggestions

        Returns:
            Up to ``limit`` usernames in discovery order.
        """
        if limit <= 0:
            return []

        suggestions: list[str] = []
        try:
            for candidate in islice(self._two_hop_candidates(user_id), limit):
                suggestions.append(candidate)
        except StoreUnavailableError as e:
            self._degrade(
                "get_follow_suggestions",
                e,
                user_id=user_id,
                collected=len(suggestions),
            )
        return suggestions

    def _two_hop_candidates(self, user_id: str) -> Iterator[str]:
        """Yield unseen users two hops away, in breadth-first discovery order.

        The frontier is ``user_id``'s most recent followees (capped at
        ``frontier_limit``); each frontier member contributes up to
        ``branch_limit`` of its own followees. The generator is lazy, so a
        consumer that stops early also stops further store reads.
        """
        frontier, _ = self.edge_store.scan_by_follower(
            user_id,
            Pagination.clamped(1, self.frontier_limit, max_limit=self.frontier_limit),
        )
        visited = {user_id, *frontier}
        branch_page = Pagination.clamped(1, self.branch_limit, max_limit=self.branch_limit)

        for followee in frontier:
            branch, _ = self.edge_store.scan_by_follower(followee, branch_page)
            for candidate in branch:
                if candidate not in visited:
                    visited.add(candidate)
                    yield candidate

    def _check_can_follow(self, follower_id: str, followee_id: str) -> None:
        if follower_id == followee_id:
            raise SelfFollowError(follower_id)
        if not self.user_lookup.user_exists(follower_id):
            raise UserNotFoundError(follower_id, side="follower")
        if not self.user_lookup.user_exists(followee_id):
            raise UserNotFoundError(followee_id, side="followee")
        if self.edge_store.exists(follower_id, followee_id):
            raise AlreadyFollowingError(follower_id, followee_id)

    def _remove_edge(
        self,
        operation: str,
        follower_id: str,
        followee_id: str,
        success_message: str,
        failure_message: str,
    ) -> ServiceResult[bool]:
        try:
            if not self.edge_store.exists(follower_id, followee_id):
                raise NotFollowingError(follower_id, followee_id)
            self.edge_store.delete(follower_id, followee_id)
        except FollowError as e:
            return self._rejected(operation, e, data=False)
        except StoreUnavailableError as e:
            self._degrade(operation, e, follower_id=follower_id, followee_id=followee_id)
            return ServiceResult.fail(
                failure_message,
                FollowErrorCode.STORE_UNAVAILABLE,
                data=False,
                degraded=True,
            )

        logger.info(
            "Follow edge removed",
            operation=operation,
            follower_id=follower_id,
            followee_id=followee_id,
        )
        return ServiceResult.ok(success_message, True)

    def _rejected(
        self, operation: str, error: FollowError, data: bool | None = None
    ) -> ServiceResult:
        logger.warning(
            "Follow request rejected",
            operation=operation,
            error_code=error.code.value,
            reason=str(error),
        )
        return ServiceResult.fail(str(error), error.code, data=data)

    def _degrade(self, operation: str, error: StoreUnavailableError, **context) -> None:
        """Apply the failure policy to a store error raised during ``operation``.

        Raises:
            StoreUnavailableError: When fail-soft is disabled
        """
        if not self.fail_soft:
            raise error
        logger.error(
            "Follow store failure, returning degraded result",
            operation=operation,
            error=str(error),
            exc_info=error,
            **context,
        )


def build_follow_service() -> FollowService:
    """Wire a FollowService from the ``FOLLOW_SERVICE`` Django setting."""
    config = getattr(settings, "FOLLOW_SERVICE", {})
    return FollowService(
        edge_store=FollowRepository(),
        user_lookup=UserRepository(),
        fail_soft=config.get("FAIL_SOFT", True),
        concurrent_reads=config.get("CONCURRENT_READS", False),
        frontier_limit=config.get("SUGGESTION_FRONTIER_LIMIT", SUGGESTION_FRONTIER_LIMIT),
        branch_limit=config.get("SUGGESTION_BRANCH_LIMIT", SUGGESTION_BRANCH_LIMIT),
    )


# Global follow service instance
follow_service = build_follow_service()
