"""Technician profile change requests.

Technicians cannot edit their own profile. They file a request, and an admin
approves it (optionally with a subset of the changes) or rejects it.
"""

import logging
from datetime import UTC, datetime
from typing import Any

from fastapi import Depends
from google.cloud.firestore import SERVER_TIMESTAMP
from pydantic import Field, ValidationError, field_validator

from db import (
    PROFILE_CHANGE_REQUESTS,
    TECHNICIANS,
    BatchWrite,
    FirestoreService,
    app_collection,
)
from dependencies import get_firestore_service
from models import (
    PROFILE_FIELDS,
    CamelModel,
    ProfileChangeRequest,
    ProfileChangeStatus,
)
from responses import ActionResult, action_failure, validation_failure

logger = logging.getLogger(__name__)

NOT_PERMITTED = "Request not found or you do not have permission to modify it."


def _only_profile_fields(changes: dict[str, Any]) -> dict[str, Any]:
    unknown = sorted(set(changes) - PROFILE_FIELDS)
    if unknown:
        raise ValueError(f"Fields cannot be changed: {', '.join(unknown)}")
    return changes


# --- Request Schemas ---


class RequestProfileChangeInput(CamelModel):
    company_id: str = Field(..., min_length=1)
    app_id: str = Field(..., min_length=1)
    technician_id: str = Field(..., min_length=1)
    technician_name: str = Field(..., min_length=1)
    requested_changes: dict[str, Any] = Field(..., min_length=1)
    notes: str | None = None

    @field_validator("requested_changes")
    @classmethod
    def check_fields(cls, v: dict[str, Any]) -> dict[str, Any]:
        return _only_profile_fields(v)


class ApproveProfileChangeInput(CamelModel):
    company_id: str = Field(..., min_length=1)
    app_id: str = Field(..., min_length=1)
    request_id: str = Field(..., min_length=1)
    approved_changes: dict[str, Any] = Field(default_factory=dict)
    review_notes: str | None = None

    @field_validator("approved_changes")
    @classmethod
    def check_fields(cls, v: dict[str, Any]) -> dict[str, Any]:
        return _only_profile_fields(v)


class RejectProfileChangeInput(CamelModel):
    company_id: str = Field(..., min_length=1)
    app_id: str = Field(..., min_length=1)
    request_id: str = Field(..., min_length=1)
    review_notes: str | None = None


async def _get_company_request(
    firestore: FirestoreService, app_id: str, request_id: str, company_id: str
) -> ProfileChangeRequest | None:
    data = await firestore.get_document(
        app_collection(app_id, PROFILE_CHANGE_REQUESTS), request_id
    )
    if data is None or data.get("companyId") != company_id:
        return None
    return ProfileChangeRequest.model_validate(data)


# --- Handlers ---


async def request_profile_change(
    payload: RequestProfileChangeInput,
    firestore: FirestoreService = Depends(get_firestore_service),
) -> ActionResult:
    """File a pending request; returns ``{"id": ...}``."""
    try:
        payload = RequestProfileChangeInput.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    try:
        request = ProfileChangeRequest(
            company_id=payload.company_id,
            technician_id=payload.technician_id,
            technician_name=payload.technician_name,
            requested_changes=payload.requested_changes,
            notes=payload.notes or "",
            created_at=datetime.now(UTC).isoformat(),
        )
        request_id = await firestore.add_document(
            app_collection(payload.app_id, PROFILE_CHANGE_REQUESTS),
            request.to_document(exclude={"id"}, exclude_none=True),
        )
        logger.info(
            "Profile change request %s filed by technician %s",
            request_id,
            payload.technician_id,
        )
        return ActionResult(data={"id": request_id})

    except Exception as e:
        logger.exception("Error filing profile change for %s", payload.technician_id)
        return action_failure("Failed to submit profile change request", e)


async def approve_profile_change_request(
    payload: ApproveProfileChangeInput,
    firestore: FirestoreService = Depends(get_firestore_service),
) -> ActionResult:
    """Apply the approved changes to the technician and close the request."""
    try:
        payload = ApproveProfileChangeInput.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    try:
        request = await _get_company_request(
            firestore, payload.app_id, payload.request_id, payload.company_id
        )
        if request is None:
            return ActionResult(error=NOT_PERMITTED)

        writes = []
        if payload.approved_changes:
            writes.append(
                BatchWrite(
                    "update",
                    app_collection(payload.app_id, TECHNICIANS),
                    request.technician_id,
                    payload.approved_changes | {"updatedAt": SERVER_TIMESTAMP},
                )
            )
        writes.append(
            BatchWrite(
                "update",
                app_collection(payload.app_id, PROFILE_CHANGE_REQUESTS),
                payload.request_id,
                {
                    "status": ProfileChangeStatus.APPROVED.value,
                    "reviewedAt": datetime.now(UTC).isoformat(),
                    "approvedChanges": payload.approved_changes,
                    "reviewNotes": payload.review_notes or "",
                },
            )
        )
        await firestore.commit_batch(writes)
        logger.info("Profile change request %s approved", payload.request_id)
        return ActionResult()

    except Exception as e:
        logger.exception("Error approving profile change %s", payload.request_id)
        return action_failure("Failed to approve request", e)


async def reject_profile_change_request(
    payload: RejectProfileChangeInput,
    firestore: FirestoreService = Depends(get_firestore_service),
) -> ActionResult:
    try:
        payload = RejectProfileChangeInput.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    try:
        request = await _get_company_request(
            firestore, payload.app_id, payload.request_id, payload.company_id
        )
        if request is None:
            return ActionResult(error=NOT_PERMITTED)

        await firestore.update_document(
            app_collection(payload.app_id, PROFILE_CHANGE_REQUESTS),
            payload.request_id,
            {
                "status": ProfileChangeStatus.REJECTED.value,
                "reviewedAt": datetime.now(UTC).isoformat(),
                "reviewNotes": payload.review_notes or "",
            },
        )
        logger.info("Profile change request %s rejected", payload.request_id)
        return ActionResult()

    except Exception as e:
        logger.exception("Error rejecting profile change %s", payload.request_id)
        return action_failure("Failed to reject request", e)
