"""POST /technicians/unavailable - Take a technician off the schedule."""

import logging

from fastapi import Depends
from google.cloud.firestore import SERVER_TIMESTAMP, ArrayUnion
from pydantic import Field, ValidationError

from db import JOBS, TECHNICIANS, BatchWrite, FirestoreService, app_collection
from dependencies import get_firestore_service
from models import CamelModel, JobStatus
from models.job import ACTIVE_STATUSES
from responses import ActionResult, action_failure, validation_failure

logger = logging.getLogger(__name__)

NOT_FOUND = "Technician not found or does not belong to your company."


class TechnicianUnavailabilityInput(CamelModel):
    company_id: str = Field(..., min_length=1)
    technician_id: str = Field(..., min_length=1)
    app_id: str = Field(..., min_length=1)
    reason: str | None = None
    unavailable_from: str | None = None
    unavailable_until: str | None = None


def unassigned_note(reason: str | None) -> str:
    suffix = f": {reason}" if reason else ""
    return f"(Reassigned: Technician marked as unavailable{suffix})"


async def handle_technician_unavailability(
    payload: TechnicianUnavailabilityInput,
    firestore: FirestoreService = Depends(get_firestore_service),
) -> ActionResult:
    """Mark a technician unavailable and return their active jobs to the queue.

    The technician update and every job update are committed in one batch.
    Returns ``{"unassignedJobIds": [...]}``.
    """
    try:
        payload = TechnicianUnavailabilityInput.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    try:
        techs = app_collection(payload.app_id, TECHNICIANS)
        technician = await firestore.get_document(techs, payload.technician_id)
        if technician is None or technician.get("companyId") != payload.company_id:
            return ActionResult(error=NOT_FOUND)

        writes = [
            BatchWrite(
                "update",
                techs,
                payload.technician_id,
                {
                    "isAvailable": False,
                    "currentJobId": None,
                    "unavailabilityReason": payload.reason or None,
                    "unavailableFrom": payload.unavailable_from or None,
                    "unavailableUntil": payload.unavailable_until or None,
                    "updatedAt": SERVER_TIMESTAMP,
                },
            )
        ]

        jobs = app_collection(payload.app_id, JOBS)
        active_jobs = await firestore.query_documents(
            jobs,
            filters=[
                ("companyId", "==", payload.company_id),
                ("assignedTechnicianId", "==", payload.technician_id),
                ("status", "in", [s.value for s in ACTIVE_STATUSES]),
            ],
        )
        for job in active_jobs:
            writes.append(
                BatchWrite(
                    "update",
                    jobs,
                    job["id"],
                    {
                        "status": JobStatus.UNASSIGNED.value,
                        "assignedTechnicianId": None,
                        "notes": ArrayUnion([unassigned_note(payload.reason)]),
                        "updatedAt": SERVER_TIMESTAMP,
                    },
                )
            )

        await firestore.commit_batch(writes)
        logger.info(
            "Technician %s marked unavailable, %d jobs unassigned",
            payload.technician_id,
            len(active_jobs),
        )
        return ActionResult(data={"unassignedJobIds": [j["id"] for j in active_jobs]})

    except Exception as e:
        logger.exception(
            "Error handling unavailability of technician %s", payload.technician_id
        )
        return action_failure("Failed to handle technician unavailability", e)
