"""POST /ai/schedule-health - Delay risk for every busy technician."""

import asyncio
import logging
from datetime import UTC, datetime

from fastapi import Depends
from pydantic import Field, ValidationError

from dependencies import get_llm_service
from flows import (
    PredictScheduleRiskInput,
    PredictScheduleRiskOutput,
    predict_schedule_risk,
)
from llm import BaseLLMService
from models import CamelModel, Job, JobStatus, Technician
from responses import ActionResult, validation_failure

logger = logging.getLogger(__name__)

NOT_IN_PROGRESS = "Technician not on an active, in-progress job."
DEFAULT_DURATION_MINUTES = 60


class CheckScheduleHealthInput(CamelModel):
    technicians: list[Technician] = Field(default_factory=list)
    jobs: list[Job] = Field(default_factory=list)


class ScheduleHealthResult(CamelModel):
    technician: Technician
    current_job: Job | None = None
    next_job: Job | None = None
    risk: PredictScheduleRiskOutput | None = None
    error: str | None = None


def _coordinates(job_or_tech: Job | Technician) -> dict[str, float]:
    return job_or_tech.location.model_dump(include={"latitude", "longitude"})


def next_assigned_job(technician_id: str, jobs: list[Job]) -> Job | None:
    """Earliest scheduled job still waiting for the technician."""
    waiting = [
        j
        for j in jobs
        if j.assigned_technician_id == technician_id and j.status == JobStatus.ASSIGNED
    ]
    # Unscheduled jobs go last
    waiting.sort(key=lambda j: (j.scheduled_time is None, j.scheduled_time or ""))
    return waiting[0] if waiting else None


async def _technician_health(
    tech: Technician, jobs: list[Job], now: str, llm: BaseLLMService
) -> ScheduleHealthResult:
    current = next((j for j in jobs if j.id == tech.current_job_id), None)
    if (
        current is None
        or current.status != JobStatus.IN_PROGRESS
        or current.in_progress_at is None
    ):
        return ScheduleHealthResult(
            technician=tech, current_job=current, error=NOT_IN_PROGRESS
        )

    nxt = next_assigned_job(tech.id, jobs)
    if nxt is None:
        return ScheduleHealthResult(technician=tech, current_job=current)

    risk = await predict_schedule_risk(
        PredictScheduleRiskInput(
            current_time=now,
            technician={"technician_id": tech.id, "technician_name": tech.name},
            current_job={
                "job_id": current.id,
                "location": _coordinates(current),
                "started_at": current.in_progress_at.isoformat(),
                "estimated_duration_minutes": current.estimated_duration_minutes
                or DEFAULT_DURATION_MINUTES,
            },
            next_job={
                "job_id": nxt.id,
                "location": _coordinates(nxt),
                "scheduled_time": nxt.scheduled_time,
            },
        ),
        llm,
    )
    return ScheduleHealthResult(
        technician=tech, current_job=current, next_job=nxt, risk=risk
    )


async def check_schedule_health(
    payload: CheckScheduleHealthInput,
    llm: BaseLLMService = Depends(get_llm_service),
) -> ActionResult:
    """Predict how late each busy technician will be for their next job.

    Technicians who are free, or whose current job is not in progress, are
    not sent to the model. Returns one entry per busy technician.
    """
    try:
        payload = CheckScheduleHealthInput.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    busy = [t for t in payload.technicians if not t.is_available and t.current_job_id]
    if not busy:
        return ActionResult(data=[])

    now = datetime.now(UTC).isoformat()
    try:
        results = await asyncio.gather(
            *(_technician_health(t, payload.jobs, now, llm) for t in busy)
        )
    except Exception:
        logger.exception("Schedule health check failed")
        return ActionResult(error="Failed to check schedule health. Please try again.")

    return ActionResult(data=[r.to_document(mode="json") for r in results])
