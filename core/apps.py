"""Django application configuration for core."""

from django.apps import AppConfig
from django.conf import settings

import structlog

logger = structlog.get_logger(__name__)


class CoreConfig(AppConfig):
    """Configuration class for the core application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "core"
    verbose_name = "Social graph"

    def ready(self) -> None:
        """Log which follow failure policy is active."""
        config = getattr(settings, "FOLLOW_SERVICE", {})
        logger.info(
            "Follow subsystem ready",
            fail_soft=config.get("FAIL_SOFT", True),
            concurrent_reads=config.get("CONCURRENT_READS", False),
        )
