"""AI module - prompt-backed helpers for dispatchers and technicians."""

from apps.ai.routes import router

__all__ = ["router"]
