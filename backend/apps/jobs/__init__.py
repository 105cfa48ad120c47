"""Jobs module - job lifecycle, documentation, tracking links and invoices."""

from apps.jobs.routes import router

__all__ = ["router"]
