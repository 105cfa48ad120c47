"""Onboarding routes."""

from fastapi import APIRouter

from apps.onboarding.handlers import complete_onboarding
from responses import ActionResult

router = APIRouter(prefix="/onboarding", tags=["Onboarding"])

# POST /onboarding - Create company (requires Bearer ID token)
router.post("", response_model=ActionResult)(complete_onboarding)
