"""Technician handlers."""

from apps.technicians.handlers.availability import (
    TechnicianUnavailabilityInput,
    handle_technician_unavailability,
)
from apps.technicians.handlers.manage_technician import (
    AddTechnicianInput,
    UpdateTechnicianInput,
    add_technician,
    update_technician,
)
from apps.technicians.handlers.profile_changes import (
    ApproveProfileChangeInput,
    RejectProfileChangeInput,
    RequestProfileChangeInput,
    approve_profile_change_request,
    reject_profile_change_request,
    request_profile_change,
)
from apps.technicians.handlers.upload_avatar import (
    UploadAvatarInput,
    upload_avatar,
    upload_avatar_endpoint,
)

__all__ = [
    "AddTechnicianInput",
    "ApproveProfileChangeInput",
    "RejectProfileChangeInput",
    "RequestProfileChangeInput",
    "TechnicianUnavailabilityInput",
    "UpdateTechnicianInput",
    "UploadAvatarInput",
    "add_technician",
    "approve_profile_change_request",
    "handle_technician_unavailability",
    "reject_profile_change_request",
    "request_profile_change",
    "update_technician",
    "upload_avatar",
    "upload_avatar_endpoint",
]
