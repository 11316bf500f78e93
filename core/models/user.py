"""User model."""

from typing import ClassVar

from django.db import models


class User(models.Model):
    """User model matching the ``users`` table.

    Usernames are the primary key and serve as the opaque user identifier
    throughout the follow subsystem. This model is unmanaged as the database
    schema is owned by another component; the social service only reads it.
    """

    username = models.CharField(max_length=50, primary_key=True)
    email = models.EmailField(max_length=255, unique=True)
    first_name = models.CharField(max_length=100, default="", blank=True)
    last_name = models.CharField(max_length=100, default="", blank=True)
    bio = models.TextField(default="", blank=True)
    profile_picture = models.URLField(max_length=500, default="", blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        db_table = "users"
        managed = False  # Schema is managed externally
        ordering: ClassVar[list[str]] = ["-created_at"]

    def __str__(self) -> str:
        """Return string representation of user."""
        return self.username

    def __repr__(self) -> str:
        """Return detailed representation of user."""
        return f"<User(username='{self.username}')>"

    @property
    def full_name(self) -> str:
        """First and last name, falling back to whichever is set, then username."""
        if self.first_name and self.last_name:
            return f"{self.first_name} {self.last_name}"
        return self.first_name or self.last_name or self.username
