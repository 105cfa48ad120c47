"""PATCH /jobs/status and POST /jobs/documentation - Field updates from technicians."""

import logging
from datetime import UTC, datetime

from fastapi import Depends
from google.cloud.firestore import SERVER_TIMESTAMP, ArrayUnion
from pydantic import Field, HttpUrl, ValidationError

from apps.jobs.helpers import release_technician
from db import JOBS, BatchWrite, FirestoreService, app_collection
from dependencies import get_firestore_service
from models import CamelModel, JobStatus
from models.job import STATUS_TIMESTAMP_FIELDS, TERMINAL_STATUSES
from responses import ActionResult, action_failure, validation_failure

logger = logging.getLogger(__name__)


# --- Request Schemas ---


class UpdateJobStatusInput(CamelModel):
    job_id: str = Field(..., min_length=1)
    status: JobStatus
    app_id: str = Field(..., min_length=1)


class AddDocumentationInput(CamelModel):
    job_id: str = Field(..., min_length=1)
    app_id: str = Field(..., min_length=1)
    notes: str | None = None
    photo_urls: list[HttpUrl] = Field(default_factory=list)
    is_first_time_fix: bool
    reason_for_follow_up: str | None = None
    signature_url: HttpUrl | None = None
    satisfaction_score: float | None = Field(None, ge=0, le=5)


def format_note(text: str, now: datetime) -> str:
    """Prefix a technician note with a timestamp header."""
    return f"\n--- {now.strftime('%Y-%m-%d %H:%M:%S')} ---\n{text.strip()}"


# --- Handlers ---


async def update_job_status(
    payload: UpdateJobStatusInput,
    firestore: FirestoreService = Depends(get_firestore_service),
) -> ActionResult:
    """Move a job to a new status.

    Entering a tracked status stamps its timestamp field. Completed,
    Cancelled and Finished free the assigned technician.
    """
    try:
        payload = UpdateJobStatusInput.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    try:
        collection = app_collection(payload.app_id, JOBS)
        job = await firestore.get_document(collection, payload.job_id)
        if job is None:
            return ActionResult(error="Job not found.")

        status = JobStatus(payload.status)
        update = {"status": status.value, "updatedAt": SERVER_TIMESTAMP}
        if status in STATUS_TIMESTAMP_FIELDS:
            update[STATUS_TIMESTAMP_FIELDS[status]] = SERVER_TIMESTAMP

        writes = [BatchWrite("update", collection, payload.job_id, update)]
        technician_id = job.get("assignedTechnicianId")
        if status in TERMINAL_STATUSES and technician_id:
            writes.append(release_technician(payload.app_id, technician_id))

        await firestore.commit_batch(writes)
        logger.info("Job %s moved to %s", payload.job_id, status.value)
        return ActionResult()

    except Exception as e:
        logger.exception("Error updating status of job %s", payload.job_id)
        return action_failure("Failed to update job status", e)


async def add_documentation(
    payload: AddDocumentationInput,
    firestore: FirestoreService = Depends(get_firestore_service),
) -> ActionResult:
    """Record on-site documentation: fix outcome, notes, photos, signature."""
    try:
        payload = AddDocumentationInput.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    try:
        update = {
            "updatedAt": SERVER_TIMESTAMP,
            "isFirstTimeFix": payload.is_first_time_fix,
            "reasonForFollowUp": ""
            if payload.is_first_time_fix
            else (payload.reason_for_follow_up or ""),
        }
        if payload.notes and payload.notes.strip():
            update["notes"] = ArrayUnion([format_note(payload.notes, datetime.now())])
        if payload.photo_urls:
            update["photos"] = ArrayUnion([str(url) for url in payload.photo_urls])
        if payload.signature_url:
            update["customerSignatureUrl"] = str(payload.signature_url)
            update["customerSignatureTimestamp"] = datetime.now(UTC).isoformat()
        # Zero means "not rated"
        if payload.satisfaction_score and payload.satisfaction_score > 0:
            update["customerSatisfactionScore"] = payload.satisfaction_score

        await firestore.update_document(
            app_collection(payload.app_id, JOBS), payload.job_id, update
        )
        logger.info("Documentation added to job %s", payload.job_id)
        return ActionResult()

    except Exception as e:
        logger.exception("Error adding documentation to job %s", payload.job_id)
        return action_failure("Failed to add documentation", e)
