"""POST /jobs/reschedule and POST /jobs/optimization - Dispatcher schedule edits."""

import logging
from datetime import UTC, datetime
from typing import Any

from fastapi import Depends
from google.cloud.firestore import DELETE_FIELD, SERVER_TIMESTAMP, ArrayUnion
from pydantic import Field, ValidationError

from apps.jobs.helpers import get_company_job
from db import (
    DISPATCHER_FEEDBACK,
    JOBS,
    MAX_BATCH_WRITES,
    BatchWrite,
    FirestoreService,
    app_collection,
)
from dependencies import get_firestore_service
from models import CamelModel, JobStatus
from responses import ActionResult, action_failure, validation_failure

logger = logging.getLogger(__name__)

MANUAL_RESCHEDULE = "manual_reschedule"
MANUAL_RESCHEDULE_REASONING = (
    "Dispatcher manually adjusted the schedule, overriding the initial AI placement."
)


# --- Request Schemas ---


class ConfirmManualRescheduleInput(CamelModel):
    company_id: str = Field(..., min_length=1)
    app_id: str = Field(..., min_length=1)
    moved_job_id: str = Field(..., min_length=1)
    new_scheduled_time: str = Field(..., min_length=1)
    ai_suggested_technician_id: str | None = None
    ai_reasoning: str | None = None


class OptimizationChange(CamelModel):
    job_id: str = Field(..., min_length=1)
    original_technician_id: str | None = None
    new_technician_id: str | None = None
    new_scheduled_time: str | None = None
    justification: str = Field(..., min_length=1)


class ConfirmFleetOptimizationInput(CamelModel):
    company_id: str = Field(..., min_length=1)
    app_id: str = Field(..., min_length=1)
    changes_to_confirm: list[OptimizationChange] = Field(
        ..., min_length=1, max_length=MAX_BATCH_WRITES
    )


def optimization_update(change: OptimizationChange) -> dict[str, Any]:
    """Job fields written for one accepted optimization suggestion."""
    update: dict[str, Any] = {
        "updatedAt": SERVER_TIMESTAMP,
        "notes": ArrayUnion(
            [f"(Reassigned via Fleet Optimization: {change.justification})"]
        ),
    }
    if change.new_scheduled_time:
        update["scheduledTime"] = change.new_scheduled_time
    if change.new_technician_id != change.original_technician_id:
        update["assignedTechnicianId"] = change.new_technician_id
        if change.new_technician_id:
            update["status"] = JobStatus.ASSIGNED.value
            update["assignedAt"] = SERVER_TIMESTAMP
        else:
            update["status"] = JobStatus.UNASSIGNED.value
            update["assignedAt"] = DELETE_FIELD
    return update


# --- Handlers ---


async def confirm_manual_reschedule(
    payload: ConfirmManualRescheduleInput,
    firestore: FirestoreService = Depends(get_firestore_service),
) -> ActionResult:
    """Move a job to a new time chosen by the dispatcher.

    When the job had been placed by the AI, the override is recorded as
    dispatcher feedback in the same batch.
    """
    try:
        payload = ConfirmManualRescheduleInput.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    try:
        job = await get_company_job(
            firestore, payload.app_id, payload.moved_job_id, payload.company_id
        )
        if job is None:
            return ActionResult(
                error=f"Job {payload.moved_job_id} not found or does not "
                "belong to your company."
            )

        writes = [
            BatchWrite(
                "update",
                app_collection(payload.app_id, JOBS),
                payload.moved_job_id,
                {
                    "scheduledTime": payload.new_scheduled_time,
                    "updatedAt": SERVER_TIMESTAMP,
                },
            )
        ]
        if payload.ai_suggested_technician_id and payload.ai_reasoning:
            writes.append(
                BatchWrite(
                    "set",
                    app_collection(payload.app_id, DISPATCHER_FEEDBACK),
                    None,
                    {
                        "companyId": payload.company_id,
                        "jobId": payload.moved_job_id,
                        "aiSuggestedTechnicianId": payload.ai_suggested_technician_id,
                        "dispatcherSelectedTechnicianId": MANUAL_RESCHEDULE,
                        "aiReasoning": payload.ai_reasoning,
                        "dispatcherReasoning": MANUAL_RESCHEDULE_REASONING,
                        "createdAt": datetime.now(UTC).isoformat(),
                    },
                )
            )

        await firestore.commit_batch(writes)
        logger.info(
            "Job %s rescheduled to %s",
            payload.moved_job_id,
            payload.new_scheduled_time,
        )
        return ActionResult()

    except Exception as e:
        logger.exception("Error rescheduling job %s", payload.moved_job_id)
        return action_failure("Failed to confirm reschedule", e)


async def confirm_fleet_optimization(
    payload: ConfirmFleetOptimizationInput,
    firestore: FirestoreService = Depends(get_firestore_service),
) -> ActionResult:
    """Apply accepted optimization suggestions in one batch.

    Nothing is written unless every job belongs to the company.
    """
    try:
        payload = ConfirmFleetOptimizationInput.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    try:
        collection = app_collection(payload.app_id, JOBS)
        writes = []
        for change in payload.changes_to_confirm:
            job = await get_company_job(
                firestore, payload.app_id, change.job_id, payload.company_id
            )
            if job is None:
                return ActionResult(
                    error=f"Job {change.job_id} not found or does not "
                    "belong to your company."
                )
            update = optimization_update(change)
            writes.append(BatchWrite("update", collection, change.job_id, update))

        await firestore.commit_batch(writes)
        logger.info(
            "Applied %d optimization changes for company %s",
            len(writes),
            payload.company_id,
        )
        return ActionResult()

    except Exception as e:
        logger.exception("Error confirming fleet optimization")
        return action_failure("Failed to apply changes", e)
