"""POST /ai/travel-metrics - Distance and CO2 for a completed job."""

import logging
from datetime import UTC, datetime
from typing import Any

from fastapi import Depends
from pydantic import Field, ValidationError

from apps.jobs.helpers import NOT_PERMITTED, get_company_job
from db import COMPANIES, JOBS, TECHNICIANS, FirestoreService, app_collection
from dependencies import get_firestore_service, get_llm_service
from flows import EstimateTravelDistanceInput, estimate_travel_distance
from llm import BaseLLMService
from models import CamelModel
from responses import ActionResult, action_failure, validation_failure

logger = logging.getLogger(__name__)

# Average light commercial vehicle
DEFAULT_EMISSIONS_KG_PER_KM = 0.192


class CalculateTravelMetricsInput(CamelModel):
    company_id: str = Field(..., min_length=1)
    app_id: str = Field(..., min_length=1)
    job_id: str = Field(..., min_length=1)
    technician_id: str = Field(..., min_length=1)


def as_utc(value: Any) -> datetime | None:
    """Read a stored timestamp (datetime or ISO string) as an aware datetime."""
    if isinstance(value, datetime):
        ts = value
    elif isinstance(value, str) and value:
        try:
            ts = datetime.fromisoformat(value)
        except ValueError:
            return None
    else:
        return None
    return ts if ts.tzinfo else ts.replace(tzinfo=UTC)


def previous_job_same_day(
    jobs: list[dict[str, Any]], job_id: str, completed_at: datetime
) -> dict[str, Any] | None:
    """The technician's job completed last before ``completed_at`` that day."""
    day_start = completed_at.replace(hour=0, minute=0, second=0, microsecond=0)
    earlier = []
    for job in jobs:
        done = as_utc(job.get("completedAt"))
        if job["id"] != job_id and done and day_start <= done < completed_at:
            earlier.append((done, job))
    if not earlier:
        return None
    return max(earlier, key=lambda pair: pair[0])[1]


async def calculate_travel_metrics(
    payload: CalculateTravelMetricsInput,
    firestore: FirestoreService = Depends(get_firestore_service),
    llm: BaseLLMService = Depends(get_llm_service),
) -> ActionResult:
    """Estimate the drive to a completed job and the CO2 it emitted.

    The drive starts at the technician's previous job that day, or at their
    home location for the first job. Stores ``travelDistanceKm`` and
    ``co2EmissionsKg`` on the job and returns them.
    """
    try:
        payload = CalculateTravelMetricsInput.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    try:
        job = await get_company_job(
            firestore, payload.app_id, payload.job_id, payload.company_id
        )
        if job is None:
            return ActionResult(error=NOT_PERMITTED.format(action="modify"))

        completed_at = as_utc(job.get("completedAt"))
        if completed_at is None:
            raise ValueError("Job is not yet completed.")

        company = await firestore.get_document(COMPANIES, payload.company_id) or {}
        factor = (company.get("settings") or {}).get("co2EmissionFactorKgPerKm")
        if factor is None:
            factor = DEFAULT_EMISSIONS_KG_PER_KM

        jobs = app_collection(payload.app_id, JOBS)
        technician_jobs = await firestore.query_documents(
            jobs, filters=[("assignedTechnicianId", "==", payload.technician_id)]
        )
        previous = previous_job_same_day(technician_jobs, payload.job_id, completed_at)
        if previous is not None:
            start = previous["location"]
        else:
            technician = await firestore.get_document(
                app_collection(payload.app_id, TECHNICIANS), payload.technician_id
            )
            if technician is None:
                raise ValueError("Technician not found.")
            start = technician["location"]

        distance = await estimate_travel_distance(
            EstimateTravelDistanceInput(
                start_location=start, end_location=job["location"]
            ),
            llm,
        )
        metrics = {
            "travelDistanceKm": distance.distance_km,
            "co2EmissionsKg": distance.distance_km * factor,
        }
        await firestore.update_document(jobs, payload.job_id, metrics)
        logger.info("Travel metrics stored for job %s: %s", payload.job_id, metrics)
        return ActionResult(data=metrics)

    except Exception as e:
        logger.exception("Error calculating travel metrics for job %s", payload.job_id)
        return action_failure("Failed to calculate metrics", e)
