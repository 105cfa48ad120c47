"""Main API router that registers all sub-routers.

This module aggregates all domain-specific routers into a single router
that gets mounted in main.py.
"""

from fastapi import APIRouter

from apps.ai import router as ai_router
from apps.catalog import router as catalog_router
from apps.chat import router as chat_router
from apps.companies import router as companies_router
from apps.health import router as health_router
from apps.jobs import router as jobs_router
from apps.onboarding import router as onboarding_router
from apps.reports import router as reports_router
from apps.technicians import router as technicians_router
from apps.tracking import router as tracking_router
from apps.triage import router as triage_router
from apps.users import router as users_router

router = APIRouter()

router.include_router(health_router)
router.include_router(users_router)
router.include_router(onboarding_router)
router.include_router(companies_router)
router.include_router(technicians_router)
router.include_router(jobs_router)
router.include_router(catalog_router)
router.include_router(chat_router)
router.include_router(tracking_router)
router.include_router(triage_router)
router.include_router(reports_router)
router.include_router(ai_router)
