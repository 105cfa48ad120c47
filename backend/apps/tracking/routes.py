"""Tracking routes - public, unauthenticated."""

from fastapi import APIRouter

from apps.tracking.handlers import get_tracking_info_endpoint
from responses import ActionResult

router = APIRouter(prefix="/track", tags=["Tracking"])

# GET /track/{token}?appId= - Tracking info
router.get("/{token}", response_model=ActionResult)(get_tracking_info_endpoint)
