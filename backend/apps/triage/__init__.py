"""Triage module - public photo triage links for customers."""

from apps.triage.routes import router

__all__ = ["router"]
