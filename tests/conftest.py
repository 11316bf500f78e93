"""Pytest configuration and shared fixtures."""

import os

import django
from django.test import Client

import pytest

# Configure Django settings for tests
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "social_service.settings_test")
django.setup()

from tests.fakes import FakeUserLookup, InMemoryEdgeStore  # noqa: E402


@pytest.fixture
def api_client():
    """Provide Django test client."""
    return Client()


@pytest.fixture
def edge_store():
    """Provide an empty in-memory edge store."""
    return InMemoryEdgeStore()


@pytest.fixture
def user_lookup():
    """Provide a user lookup that knows no users."""
    return FakeUserLookup()
