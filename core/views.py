"""API views for core application."""

import structlog
from django.conf import settings
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from core.constants import DEFAULT_SUGGESTION_LIMIT, MAX_PAGE_SIZE
from core.exceptions.handlers import status_for_error
from core.pagination import Pagination
from core.schemas.follow import ServiceResult
from core.services import follow_presenter, follow_service, health_service

logger = structlog.get_logger(__name__)


def _bad_request(message: str, detail: str) -> Response:
    return Response(
        {"error": "bad_request", "message": message, "detail": detail},
        status=status.HTTP_400_BAD_REQUEST,
    )


def _default_suggestion_limit() -> int:
    return getattr(settings, "FOLLOW_SERVICE", {}).get(
        "DEFAULT_SUGGESTION_LIMIT", DEFAULT_SUGGESTION_LIMIT
    )


def _result_response(result: ServiceResult, success_status: int) -> Response:
    """Render a service result, mapping failures to their HTTP status."""
    response_status = (
        success_status if result.success else status_for_error(result.error)
    )
    return Response(
        result.model_dump(mode="json", by_alias=True), status=response_status
    )


class LivenessCheckView(APIView):
    """Liveness probe endpoint for Kubernetes.

    Returns 200 if the service is alive and running.
    This should not check external dependencies.
    """

    authentication_classes = ()
    permission_classes = (AllowAny,)

    def get(self, _request):
        """Handle GET request for liveness check."""
        liveness = health_service.get_liveness_status()
        return Response(liveness.model_dump(), status=status.HTTP_200_OK)


class ReadinessCheckView(APIView):
    """Readiness probe endpoint for Kubernetes.

    Returns 200 with ``degraded`` set when the database is unavailable, so
    the service keeps receiving traffic while follow reads fall back.
    """

    authentication_classes = ()
    permission_classes = (AllowAny,)

    def get(self, _request):
        """Handle GET request for readiness check."""
        readiness = health_service.get_readiness_status()
        return Response(readiness.model_dump(mode="json"), status=status.HTTP_200_OK)


class FollowRelationshipView(APIView):
    """API endpoint for a single follow edge ``follower -> followee``.

    POST: follow, DELETE: unfollow, GET: check whether the edge exists.
    """

    permission_classes = (AllowAny,)

    def post(self, _request, follower, followee):
        """Make ``follower`` follow ``followee``.

        Returns:
            201 Created with the follow edge if successful
            400 Bad Request if a user tries to follow themselves
            404 Not Found if either user does not exist
            409 Conflict if the edge already exists
            503 Service Unavailable if the follow store is down
        """
        logger.info("Follow request received", follower=follower, followee=followee)
        result = follow_service.follow_user(follower, followee)
        return _result_response(result, status.HTTP_201_CREATED)

    def delete(self, _request, follower, followee):
        """Make ``follower`` stop following ``followee``.

        Returns:
            200 OK if the edge was removed
            404 Not Found if the edge does not exist
            503 Service Unavailable if the follow store is down
        """
        logger.info("Unfollow request received", follower=follower, followee=followee)
        result = follow_service.unfollow_user(follower, followee)
        return _result_response(result, status.HTTP_200_OK)

    def get(self, _request, follower, followee):
        """Report whether ``follower`` follows ``followee``."""
        is_following = follow_service.is_following(follower, followee)
        return Response(
            {"follower": follower, "followee": followee, "isFollowing": is_following},
            status=status.HTTP_200_OK,
        )


class FollowerDetailView(APIView):
    """API endpoint for removing a follower from a user's followers."""

    permission_classes = (AllowAny,)

    def delete(self, _request, username, follower):
        """Remove ``follower`` from ``username``'s followers.

        Returns:
            200 OK if the follower was removed
            404 Not Found if ``follower`` does not follow ``username``
            503 Service Unavailable if the follow store is down
        """
        logger.info("Remove follower request received", user=username, follower=follower)
        result = follow_service.remove_follower(username, follower)
        return _result_response(result, status.HTTP_200_OK)


class _FollowListView(APIView):
    """Shared handling for paginated follower/following listings."""

    permission_classes = (AllowAny,)
    list_name = ""

    def fetch(self, username, pagination):
        raise NotImplementedError

    def get(self, request, username):
        """Return one page of user summaries.

        Query parameters:
        - page: Page number (default: 1)
        - limit: Items per page (default: 10, max: 100)
        """
        try:
            pagination = Pagination.from_query_params(request.query_params)
        except ValueError:
            return _bad_request(
                "Invalid pagination parameters",
                "page and limit must be integers",
            )

        page = follow_presenter.present_page(self.fetch(username, pagination))

        logger.info(
            "Follow list retrieved",
            list_name=self.list_name,
            user=username,
            page=page.page,
            count=len(page.data),
            degraded=page.degraded,
        )
        return Response(
            page.model_dump(mode="json", by_alias=True), status=status.HTTP_200_OK
        )


class FollowerListView(_FollowListView):
    """API endpoint listing the users who follow ``username``."""

    list_name = "followers"

    def fetch(self, username, pagination):
        return follow_service.get_followers(username, pagination)


class FollowingListView(_FollowListView):
    """API endpoint listing the users ``username`` follows."""

    list_name = "following"

    def fetch(self, username, pagination):
        return follow_service.get_following(username, pagination)


class FollowStatsView(APIView):
    """API endpoint for follower/following counts."""

    permission_classes = (AllowAny,)

    def get(self, _request, username):
        """Return ``followingCount`` and ``followersCount`` for ``username``."""
        stats = follow_service.get_follow_stats(username)
        return Response(
            stats.model_dump(mode="json", by_alias=True), status=status.HTTP_200_OK
        )


class MutualFollowsView(APIView):
    """API endpoint for users followed by both ``username`` and ``other``."""

    permission_classes = (AllowAny,)

    def get(self, _request, username, other):
        """Return user summaries ordered by ``username``'s follow recency."""
        users = follow_presenter.present_users(
            follow_service.get_mutual_follows(username, other)
        )
        return Response(
            {"data": [user.model_dump(by_alias=True) for user in users]},
            status=status.HTTP_200_OK,
        )


class FollowSuggestionsView(APIView):
    """API endpoint for two-hop follow suggestions."""

    permission_classes = (AllowAny,)

    def get(self, request, username):
        """Suggest users to follow.

        Query parameters:
        - limit: Maximum suggestions (default: 10, max: 100)
        """
        raw_limit = request.query_params.get("limit")
        try:
            limit = int(raw_limit) if raw_limit else _default_suggestion_limit()
        except ValueError:
            return _bad_request("Invalid limit", "limit must be an integer")
        limit = min(max(limit, 1), MAX_PAGE_SIZE)

        suggestions = follow_service.get_follow_suggestions(username, limit)
        users = follow_presenter.present_users(suggestions)

        logger.info(
            "Follow suggestions computed",
            user=username,
            requested=limit,
            found=len(users),
        )
        return Response(
            {"data": [user.model_dump(by_alias=True) for user in users]},
            status=status.HTTP_200_OK,
        )
