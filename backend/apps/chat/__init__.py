"""Chat module - messages between dispatchers and technicians."""

from apps.chat.routes import router

__all__ = ["router"]
