"""Companies module - company profile and settings."""

from apps.companies.routes import router

__all__ = ["router"]
