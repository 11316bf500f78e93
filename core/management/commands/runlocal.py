"""Development server command that does not require migrations.

The users and follows tables are created by the component that owns the
schema, so the social service can start against an existing database (or
none at all, in which case readiness reports degraded).
"""

from django.core.management.commands.runserver import Command as RunServer


class Command(RunServer):
    """runserver variant that skips the unapplied-migrations warning."""

    help = "Start the social service development server without migration checks"

    def check_migrations(self, *_args, **_kwargs):
        """Report that migration checks are skipped."""
        self.stdout.write(
            self.style.WARNING(
                "Skipping migration checks (users/follows schema is external)"
            )
        )
