"""Technician routes - registers all technician endpoints."""

from fastapi import APIRouter

from apps.technicians.handlers import (
    add_technician,
    approve_profile_change_request,
    handle_technician_unavailability,
    reject_profile_change_request,
    request_profile_change,
    update_technician,
    upload_avatar_endpoint,
)
from responses import ActionResult

router = APIRouter(prefix="/technicians", tags=["Technicians"])

# POST /technicians?appId= - Add technician
router.post("", response_model=ActionResult)(add_technician)

# PUT /technicians?appId= - Update technician
router.put("", response_model=ActionResult)(update_technician)

# POST /technicians/unavailable - Mark unavailable, unassign active jobs
router.post("/unavailable", response_model=ActionResult)(
    handle_technician_unavailability
)

# Profile change requests
router.post("/profile-change-requests", response_model=ActionResult)(
    request_profile_change
)
router.post("/profile-change-requests/approve", response_model=ActionResult)(
    approve_profile_change_request
)
router.post("/profile-change-requests/reject", response_model=ActionResult)(
    reject_profile_change_request
)

# POST /technicians/{technician_id}/avatar - Upload avatar (multipart)
router.post("/{technician_id}/avatar", response_model=ActionResult)(
    upload_avatar_endpoint
)
