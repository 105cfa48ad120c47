"""Triage routes - public, unauthenticated."""

from fastapi import APIRouter

from apps.triage.handlers import (
    get_triage_info_endpoint,
    submit_triage_photos_endpoint,
)
from responses import ActionResult

router = APIRouter(prefix="/triage", tags=["Triage"])

# GET /triage/{token}?appId= - Job title and customer for the upload page
router.get("/{token}", response_model=ActionResult)(get_triage_info_endpoint)

# POST /triage/{token} - Upload photos and run the AI triage (multipart)
router.post("/{token}", response_model=ActionResult)(submit_triage_photos_endpoint)
