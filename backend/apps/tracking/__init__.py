"""Tracking module - customer-facing job tracking links."""

from apps.tracking.routes import router

__all__ = ["router"]
