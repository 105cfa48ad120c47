"""Shared helpers for job handlers."""

from typing import Any

from db import JOBS, TECHNICIANS, BatchWrite, FirestoreService, app_collection

NOT_PERMITTED = "Job not found or you do not have permission to {action} it."


def release_technician(app_id: str, technician_id: str) -> BatchWrite:
    """Mark a technician free again."""
    return BatchWrite(
        "update",
        app_collection(app_id, TECHNICIANS),
        technician_id,
        {"isAvailable": True, "currentJobId": None},
    )


def occupy_technician(app_id: str, technician_id: str, job_id: str) -> BatchWrite:
    """Mark a technician busy with ``job_id``."""
    return BatchWrite(
        "update",
        app_collection(app_id, TECHNICIANS),
        technician_id,
        {"isAvailable": False, "currentJobId": job_id},
    )


async def get_company_job(
    firestore: FirestoreService, app_id: str, job_id: str, company_id: str
) -> dict[str, Any] | None:
    """Fetch a job, or None if it is missing or owned by another company."""
    job = await firestore.get_document(app_collection(app_id, JOBS), job_id)
    if job is None or job.get("companyId") != company_id:
        return None
    return job
