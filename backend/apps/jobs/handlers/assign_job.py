"""POST /jobs/reassign and DELETE /jobs/{job_id} - Dispatcher changes."""

import logging
from typing import Any

from fastapi import Depends, Query
from google.cloud.firestore import SERVER_TIMESTAMP, ArrayUnion
from pydantic import Field, ValidationError

from apps.jobs.helpers import (
    NOT_PERMITTED,
    get_company_job,
    occupy_technician,
    release_technician,
)
from db import JOBS, TECHNICIANS, BatchWrite, FirestoreService, app_collection
from dependencies import get_firestore_service
from models import CamelModel, JobStatus
from responses import ActionResult, action_failure, validation_failure

logger = logging.getLogger(__name__)


# --- Request Schemas ---


class ReassignJobInput(CamelModel):
    app_id: str = Field(..., min_length=1)
    company_id: str = Field(..., min_length=1)
    job_id: str = Field(..., min_length=1)
    new_technician_id: str = Field(..., min_length=1)
    reason: str | None = None
    new_scheduled_time: str | None = None


class DeleteJobInput(CamelModel):
    job_id: str = Field(..., min_length=1)
    company_id: str = Field(..., min_length=1)
    app_id: str = Field(..., min_length=1)


# --- Handlers ---


async def reassign_job(
    payload: ReassignJobInput,
    firestore: FirestoreService = Depends(get_firestore_service),
) -> ActionResult:
    """Give a job to another technician, freeing the previous one."""
    try:
        payload = ReassignJobInput.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    try:
        job = await get_company_job(
            firestore, payload.app_id, payload.job_id, payload.company_id
        )
        if job is None:
            return ActionResult(error=NOT_PERMITTED.format(action="modify"))

        update = {
            "assignedTechnicianId": payload.new_technician_id,
            "status": JobStatus.ASSIGNED.value,
            "updatedAt": SERVER_TIMESTAMP,
            "assignedAt": SERVER_TIMESTAMP,
        }
        if payload.reason:
            update["notes"] = ArrayUnion(
                [f"(Reassigned by dispatcher: {payload.reason})"]
            )
        if payload.new_scheduled_time:
            update["scheduledTime"] = payload.new_scheduled_time

        writes = [
            BatchWrite(
                "update", app_collection(payload.app_id, JOBS), payload.job_id, update
            )
        ]
        previous = job.get("assignedTechnicianId")
        if previous != payload.new_technician_id:
            if previous:
                writes.append(release_technician(payload.app_id, previous))
            writes.append(
                occupy_technician(
                    payload.app_id, payload.new_technician_id, payload.job_id
                )
            )

        await firestore.commit_batch(writes)
        logger.info(
            "Job %s reassigned from %s to %s",
            payload.job_id,
            previous,
            payload.new_technician_id,
        )
        return ActionResult()

    except Exception as e:
        logger.exception("Error reassigning job %s", payload.job_id)
        return action_failure("Failed to reassign job", e)


async def delete_job(
    payload: DeleteJobInput | dict[str, Any],
    firestore: FirestoreService = Depends(get_firestore_service),
) -> ActionResult:
    """Delete a job; its technician is freed if it was their current job."""
    try:
        payload = DeleteJobInput.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    try:
        job = await get_company_job(
            firestore, payload.app_id, payload.job_id, payload.company_id
        )
        if job is None:
            return ActionResult(error=NOT_PERMITTED.format(action="delete"))

        writes = []
        technician_id = job.get("assignedTechnicianId")
        if technician_id:
            technician = await firestore.get_document(
                app_collection(payload.app_id, TECHNICIANS), technician_id
            )
            if technician and technician.get("currentJobId") == payload.job_id:
                writes.append(release_technician(payload.app_id, technician_id))

        writes.append(
            BatchWrite("delete", app_collection(payload.app_id, JOBS), payload.job_id)
        )
        await firestore.commit_batch(writes)
        logger.info("Job %s deleted", payload.job_id)
        return ActionResult()

    except Exception as e:
        logger.exception("Error deleting job %s", payload.job_id)
        return action_failure("Failed to delete job", e)


async def delete_job_endpoint(
    job_id: str,
    company_id: str = Query(..., alias="companyId"),
    app_id: str = Query(..., alias="appId"),
    firestore: FirestoreService = Depends(get_firestore_service),
) -> ActionResult:
    """Path/query variant of delete_job."""
    return await delete_job(
        {"job_id": job_id, "company_id": company_id, "app_id": app_id},
        firestore=firestore,
    )
