"""Onboarding module - company creation for new admins."""

from apps.onboarding.routes import router

__all__ = ["router"]
