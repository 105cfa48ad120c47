"""GET /track/{token} - Public job tracking for customers."""

import logging
from datetime import UTC, datetime
from typing import Any

from fastapi import Depends, Query
from pydantic import Field, ValidationError

from db import JOBS, TECHNICIANS, FirestoreService, app_collection
from dependencies import get_firestore_service
from models import CamelModel, JobStatus, Location, Technician
from responses import ActionResult, action_failure, validation_failure

logger = logging.getLogger(__name__)

INVALID_LINK = "Tracking link is invalid or has expired."
NOT_ASSIGNED = (
    "A technician has not yet been assigned to this job. Please check back later."
)
CLOSED_STATUSES = frozenset({JobStatus.COMPLETED.value, JobStatus.CANCELLED.value})


class GetTrackingInfoInput(CamelModel):
    token: str = Field(..., min_length=1)
    app_id: str = Field(..., min_length=1)


class PublicTrackingInfo(CamelModel):
    """The only job details exposed through a tracking link."""

    job_status: JobStatus
    job_location: Location
    technician_name: str
    technician_location: Location
    customer_name: str


def is_expired(expires_at: str | None, now: datetime) -> bool:
    """Missing or unparseable expiries count as expired."""
    if not expires_at:
        return True
    try:
        expiry = datetime.fromisoformat(expires_at)
    except ValueError:
        return True
    if expiry.tzinfo is None:
        expiry = expiry.replace(tzinfo=UTC)
    return expiry < now


async def get_tracking_info(
    payload: GetTrackingInfoInput | dict[str, Any],
    firestore: FirestoreService,
) -> ActionResult:
    """Resolve a tracking token to public job and technician details."""
    try:
        payload = GetTrackingInfoInput.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    try:
        matches = await firestore.query_documents(
            app_collection(payload.app_id, JOBS),
            filters=[("trackingToken", "==", payload.token)],
            limit=1,
        )
        if not matches:
            return ActionResult(error=INVALID_LINK)
        job = matches[0]

        if is_expired(job.get("trackingTokenExpiresAt"), datetime.now(UTC)):
            return ActionResult(error=INVALID_LINK)

        status = job.get("status", "")
        if status in CLOSED_STATUSES:
            return ActionResult(
                error=f"This job is now {status.lower()}. "
                "Tracking is no longer available."
            )

        technician_id = job.get("assignedTechnicianId")
        if not technician_id:
            return ActionResult(error=NOT_ASSIGNED)

        technician = await firestore.get_document(
            app_collection(payload.app_id, TECHNICIANS), technician_id
        )
        if technician is None:
            return ActionResult(error="Could not retrieve technician details.")

        tech = Technician.model_validate(technician)
        info = PublicTrackingInfo(
            job_status=status,
            job_location=job["location"],
            technician_name=tech.name,
            technician_location=tech.location,
            customer_name=job.get("customerName", ""),
        )
        return ActionResult(data=info.to_document())

    except Exception as e:
        logger.exception("Error resolving tracking token")
        return action_failure("An unexpected error occurred", e)


async def get_tracking_info_endpoint(
    token: str,
    app_id: str = Query(..., alias="appId"),
    firestore: FirestoreService = Depends(get_firestore_service),
) -> ActionResult:
    return await get_tracking_info(
        {"token": token, "app_id": app_id}, firestore=firestore
    )
