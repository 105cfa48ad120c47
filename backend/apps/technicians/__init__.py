"""Technicians module - technician profiles and avatars."""

from apps.technicians.routes import router

__all__ = ["router"]
