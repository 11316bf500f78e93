"""URL routing configuration for core application."""

from django.urls import path

from .views import (
    FollowerDetailView,
    FollowerListView,
    FollowingListView,
    FollowRelationshipView,
    FollowStatsView,
    FollowSuggestionsView,
    LivenessCheckView,
    MutualFollowsView,
    ReadinessCheckView,
)

urlpatterns = [
    # Health check endpoints
    path("health/live", LivenessCheckView.as_view(), name="health-live"),
    path("health/ready", ReadinessCheckView.as_view(), name="health-ready"),
    # Follow edge endpoints
    path(
        "users/<str:follower>/following/<str:followee>",
        FollowRelationshipView.as_view(),
        name="follow-relationship",
    ),
    path(
        "users/<str:username>/followers/<str:follower>",
        FollowerDetailView.as_view(),
        name="follower-detail",
    ),
    # Follow listings
    path(
        "users/<str:username>/followers",
        FollowerListView.as_view(),
        name="follower-list",
    ),
    path(
        "users/<str:username>/following",
        FollowingListView.as_view(),
        name="following-list",
    ),
    path(
        "users/<str:username>/follow-stats",
        FollowStatsView.as_view(),
        name="follow-stats",
    ),
    path(
        "users/<str:username>/mutual-follows/<str:other>",
        MutualFollowsView.as_view(),
        name="mutual-follows",
    ),
    path(
        "users/<str:username>/follow-suggestions",
        FollowSuggestionsView.as_view(),
        name="follow-suggestions",
    ),
]
