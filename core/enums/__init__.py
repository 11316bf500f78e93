"""Enumerations for the core app."""

from core.enums.health_status import HealthStatus

__all__ = ["HealthStatus"]
