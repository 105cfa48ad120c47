"""Catalog module - per-company parts and skills libraries."""

from apps.catalog.routes import router

__all__ = ["router"]
