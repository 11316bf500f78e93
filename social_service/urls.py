"""Root URL configuration for the social service."""

from django.urls import include, path

urlpatterns = [
    path("api/v1/social/", include("core.urls")),
]
