"""POST /jobs - Create a job; POST /jobs/import - Bulk import."""

import logging

from fastapi import Depends
from google.cloud.firestore import SERVER_TIMESTAMP
from pydantic import EmailStr, Field, ValidationError

from apps.jobs.helpers import occupy_technician
from db import JOBS, MAX_BATCH_WRITES, BatchWrite, FirestoreService, app_collection
from dependencies import get_firestore_service
from models import CamelModel, Job, JobFlexibility, JobPriority, JobStatus, Location
from responses import ActionResult, action_failure, validation_failure

logger = logging.getLogger(__name__)

IMPORT_NOTE = "Imported via CSV."


# --- Request Schemas ---


class CreateJobInput(CamelModel):
    app_id: str = Field(..., min_length=1)
    company_id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    description: str = ""
    priority: JobPriority = JobPriority.MEDIUM
    customer_name: str = Field(..., min_length=1)
    customer_phone: str = ""
    customer_email: EmailStr | None = None
    location: Location
    scheduled_time: str | None = None
    estimated_duration_minutes: int | None = Field(None, ge=1)
    quoted_value: float | None = Field(None, ge=0)
    expected_parts_cost: float | None = Field(None, ge=0)
    required_skills: list[str] = Field(default_factory=list)
    required_parts: list[str] = Field(default_factory=list)
    assigned_technician_id: str | None = None


class JobImportRow(CamelModel):
    title: str = Field(..., min_length=1)
    description: str | None = None
    priority: JobPriority
    customer_name: str | None = None
    customer_phone: str | None = None
    address: str = Field(..., min_length=1)
    scheduled_time: str | None = None
    estimated_duration_minutes: int = Field(..., ge=1)
    required_skills: list[str] = Field(default_factory=list)
    required_parts: list[str] = Field(default_factory=list)
    quoted_value: float | None = None
    expected_parts_cost: float | None = None
    sla_deadline: str | None = None
    flexibility: JobFlexibility = JobFlexibility.FLEXIBLE
    dispatch_locked: bool = False


class ImportJobsInput(CamelModel):
    company_id: str
    app_id: str = Field(..., min_length=1)
    # One batch per import
    jobs: list[JobImportRow] = Field(..., max_length=MAX_BATCH_WRITES)


# --- Handlers ---


async def create_job(
    payload: CreateJobInput,
    firestore: FirestoreService = Depends(get_firestore_service),
) -> ActionResult:
    """Create a job; assigning a technician also marks them busy."""
    try:
        payload = CreateJobInput.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    try:
        collection = app_collection(payload.app_id, JOBS)
        job_id = firestore.new_document_id(collection)
        technician_id = payload.assigned_technician_id or None

        job = Job.model_validate(
            payload.model_dump(exclude={"app_id"})
            | {
                "status": JobStatus.ASSIGNED if technician_id else JobStatus.UNASSIGNED,
                "assigned_technician_id": technician_id,
            }
        )
        document = job.to_document(exclude={"id"})
        document.update({"createdAt": SERVER_TIMESTAMP, "updatedAt": SERVER_TIMESTAMP})
        if technician_id:
            document["assignedAt"] = SERVER_TIMESTAMP

        writes = [BatchWrite("set", collection, job_id, document)]
        if technician_id:
            writes.append(occupy_technician(payload.app_id, technician_id, job_id))
        await firestore.commit_batch(writes)

        logger.info("Job %s created for company %s", job_id, payload.company_id)
        return ActionResult(data={"id": job_id})

    except Exception as e:
        logger.exception("Error creating job")
        return action_failure("Failed to create job", e)


async def import_jobs(
    payload: ImportJobsInput,
    firestore: FirestoreService = Depends(get_firestore_service),
) -> ActionResult:
    """Create all rows as unassigned jobs in one batch; returns ``successCount``."""
    try:
        payload = ImportJobsInput.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e, data={"successCount": 0})

    try:
        collection = app_collection(payload.app_id, JOBS)
        writes = []
        for row in payload.jobs:
            job = Job(
                company_id=payload.company_id,
                title=row.title,
                description=row.description or "",
                priority=row.priority,
                status=JobStatus.UNASSIGNED,
                customer_name=row.customer_name or "N/A",
                customer_phone=row.customer_phone or "N/A",
                location=Location(latitude=0, longitude=0, address=row.address),
                scheduled_time=row.scheduled_time,
                estimated_duration_minutes=row.estimated_duration_minutes,
                quoted_value=row.quoted_value,
                expected_parts_cost=row.expected_parts_cost,
                required_skills=row.required_skills,
                required_parts=row.required_parts,
                sla_deadline=row.sla_deadline,
                flexibility=row.flexibility,
                dispatch_locked=row.dispatch_locked,
                notes=[IMPORT_NOTE],
            )
            document = job.to_document(exclude={"id"})
            document.update(
                {"createdAt": SERVER_TIMESTAMP, "updatedAt": SERVER_TIMESTAMP}
            )
            writes.append(BatchWrite("set", collection, None, document))

        await firestore.commit_batch(writes)
        logger.info(
            "Imported %d jobs for company %s", len(writes), payload.company_id
        )
        return ActionResult(data={"successCount": len(writes)})

    except Exception as e:
        logger.exception("Error importing jobs")
        return action_failure("Failed to import jobs", e, data={"successCount": 0})
