"""Reports module - AI summaries of operational data."""

from apps.reports.routes import router

__all__ = ["router"]
