"""Technician and profile change request document schemas."""

from enum import Enum
from typing import Any

from pydantic import Field

from models.common import CamelModel, Location

# Technician fields a profile change request may touch
PROFILE_FIELDS = frozenset({"name", "email", "phone", "skills", "location", "avatarUrl"})


class Technician(CamelModel):
    """A field technician.

    Path: artifacts/{app_id}/public/data/technicians/{technician_id}
    """

    id: str = ""
    company_id: str | None = None
    name: str
    email: str | None = None
    phone: str | None = None
    skills: list[str] = Field(default_factory=list)
    is_available: bool = True
    location: Location
    avatar_url: str | None = None
    current_job_id: str | None = None
    unavailability_reason: str | None = None
    unavailable_from: str | None = None
    unavailable_until: str | None = None


class ProfileChangeStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class ProfileChangeRequest(CamelModel):
    """A technician's request to edit their own profile, reviewed by an admin.

    Path: artifacts/{app_id}/public/data/profileChangeRequests/{request_id}
    """

    id: str = ""
    company_id: str
    technician_id: str
    technician_name: str
    requested_changes: dict[str, Any]
    notes: str = ""
    status: ProfileChangeStatus = ProfileChangeStatus.PENDING
    created_at: str
    reviewed_at: str | None = None
    approved_changes: dict[str, Any] | None = None
    review_notes: str | None = None
