"""Users module - user documents, membership and auth claims."""

from apps.users.routes import router

__all__ = ["router"]
