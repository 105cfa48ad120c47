"""Scheduling flows: time slots, next availability, delay risk, distance."""

from datetime import UTC, datetime

from pydantic import Field

from flows.base import bullet_list, run_prompt
from llm import BaseLLMService
from llm.prompts.scheduling import (
    DISTANCE_SYSTEM_PROMPT,
    ESTIMATE_TRAVEL_DISTANCE_PROMPT,
    PREDICT_NEXT_TECHNICIANS_PROMPT,
    PREDICT_SCHEDULE_RISK_PROMPT,
    SCHEDULER_SYSTEM_PROMPT,
    SUGGEST_SCHEDULE_TIME_PROMPT,
)
from models import BusinessHours, CamelModel, JobPriority


class Coordinates(CamelModel):
    latitude: float
    longitude: float


# --- Suggest schedule time ---


class ScheduledJob(CamelModel):
    scheduled_time: str


class ScheduleTechnician(CamelModel):
    id: str
    name: str
    skills: list[str] = Field(default_factory=list)
    jobs: list[ScheduledJob] = Field(default_factory=list)


class SuggestScheduleTimeInput(CamelModel):
    current_time: str = Field(..., min_length=1, description="ISO 8601 baseline time")
    job_priority: JobPriority
    required_skills: list[str] = Field(default_factory=list)
    preferred_date: str | None = None
    business_hours: list[BusinessHours] = Field(default_factory=list)
    excluded_times: list[str] = Field(
        default_factory=list, description="Slots the customer already rejected"
    )
    technicians: list[ScheduleTechnician]


class ScheduleSuggestion(CamelModel):
    time: str = Field(..., description="Suggested start, ISO 8601")
    technician_id: str
    reasoning: str


class SuggestScheduleTimeOutput(CamelModel):
    suggestions: list[ScheduleSuggestion] = Field(default_factory=list, max_length=5)


def _format_business_hours(hours: list[BusinessHours]) -> str:
    if not hours:
        return "Not specified."
    return bullet_list(
        f"{h.day_of_week}: {f'{h.start_time} - {h.end_time}' if h.is_open else 'Closed'}"
        for h in hours
    )


def _format_schedule_technician(tech: ScheduleTechnician) -> str:
    skills = ", ".join(tech.skills) or "None listed"
    if tech.jobs:
        jobs = "\n".join(f"    - Job starting at: {j.scheduled_time}" for j in tech.jobs)
    else:
        jobs = "    - This technician has no scheduled jobs."
    return (
        f"- Technician: {tech.name} (ID: {tech.id})\n"
        f"  - Skills: {skills}\n"
        f"  - Scheduled Jobs:\n{jobs}"
    )


async def suggest_schedule_time(
    payload: SuggestScheduleTimeInput, llm: BaseLLMService
) -> SuggestScheduleTimeOutput:
    excluded = ""
    if payload.excluded_times:
        excluded = (
            "\nThe following time slots have been rejected by the customer. "
            f"Do NOT suggest them again:\n{bullet_list(payload.excluded_times)}\n"
        )
    preferred = (
        f"{payload.preferred_date} (Try to schedule on or very close to this date)."
        if payload.preferred_date
        else "None specified."
    )
    technicians = "\n".join(
        _format_schedule_technician(t) for t in payload.technicians
    )

    return await run_prompt(
        llm,
        name="suggest_schedule_time",
        system=SCHEDULER_SYSTEM_PROMPT,
        prompt=SUGGEST_SCHEDULE_TIME_PROMPT.format(
            current_time=payload.current_time,
            job_priority=payload.job_priority,
            required_skills=", ".join(payload.required_skills) or "None",
            preferred_date=preferred,
            business_hours=_format_business_hours(payload.business_hours),
            excluded_times_section=excluded,
            technicians=technicians or "No technicians.",
        ),
        output_model=SuggestScheduleTimeOutput,
    )


# --- Predict next available technicians ---


class ActiveJob(CamelModel):
    job_id: str
    title: str
    assigned_technician_id: str
    estimated_duration_minutes: int | None = None
    started_at: str | None = Field(None, description="ISO 8601 start of the job")


class BusyTechnician(CamelModel):
    technician_id: str
    technician_name: str
    current_location: Coordinates
    current_job_id: str


class PredictNextAvailableTechniciansInput(CamelModel):
    active_jobs: list[ActiveJob] = Field(default_factory=list)
    busy_technicians: list[BusyTechnician] = Field(default_factory=list)
    current_time: str = Field(..., min_length=1, description="ISO 8601 baseline time")


class AvailabilityPrediction(CamelModel):
    technician_id: str
    technician_name: str
    estimated_availability_time: datetime = Field(
        ..., description="When the technician will be available, ISO 8601"
    )
    reasoning: str


class PredictNextAvailableTechniciansOutput(CamelModel):
    predictions: list[AvailabilityPrediction] = Field(default_factory=list)


def _availability_key(prediction: AvailabilityPrediction) -> datetime:
    ts = prediction.estimated_availability_time
    # Naive timestamps are taken as UTC so mixed answers still compare
    return ts if ts.tzinfo else ts.replace(tzinfo=UTC)


async def predict_next_available_technicians(
    payload: PredictNextAvailableTechniciansInput, llm: BaseLLMService
) -> PredictNextAvailableTechniciansOutput:
    """Rank busy technicians by when they are expected to free up.

    Returns no predictions without calling the model when nobody is busy.
    """
    if not payload.busy_technicians:
        return PredictNextAvailableTechniciansOutput(predictions=[])

    busy = bullet_list(
        f"Technician ID: {t.technician_id}, Name: {t.technician_name}, "
        f"Current Job ID: {t.current_job_id}"
        for t in payload.busy_technicians
    )
    jobs = bullet_list(
        f'Job ID: {j.job_id}, Title: "{j.title}", Assigned To: {j.assigned_technician_id}, '
        f"Est. Duration: {j.estimated_duration_minutes or 'unknown'} minutes."
        + (f" Started At: {j.started_at}." if j.started_at else "")
        for j in payload.active_jobs
    )

    output = await run_prompt(
        llm,
        name="predict_next_available_technicians",
        system=SCHEDULER_SYSTEM_PROMPT,
        prompt=PREDICT_NEXT_TECHNICIANS_PROMPT.format(
            current_time=payload.current_time,
            busy_technicians=busy,
            active_jobs=jobs,
        ),
        output_model=PredictNextAvailableTechniciansOutput,
    )
    output.predictions.sort(key=_availability_key)
    return output


# --- Predict schedule risk ---


class RiskTechnician(CamelModel):
    technician_id: str
    technician_name: str


class RiskCurrentJob(CamelModel):
    job_id: str
    location: Coordinates
    started_at: str
    estimated_duration_minutes: int = Field(..., ge=0)


class RiskNextJob(CamelModel):
    job_id: str
    location: Coordinates
    scheduled_time: str | None = None


class PredictScheduleRiskInput(CamelModel):
    current_time: str = Field(..., min_length=1)
    technician: RiskTechnician
    current_job: RiskCurrentJob
    next_job: RiskNextJob


class PredictScheduleRiskOutput(CamelModel):
    predicted_delay_minutes: int = Field(
        ..., description="Minutes late at the next job; zero or negative is on time"
    )
    reasoning: str


async def predict_schedule_risk(
    payload: PredictScheduleRiskInput, llm: BaseLLMService
) -> PredictScheduleRiskOutput:
    current, nxt = payload.current_job, payload.next_job
    next_scheduled = (
        f"Scheduled Time: {nxt.scheduled_time} (This is a firm appointment)"
        if nxt.scheduled_time
        else "No specific scheduled time."
    )
    return await run_prompt(
        llm,
        name="predict_schedule_risk",
        system=SCHEDULER_SYSTEM_PROMPT,
        prompt=PREDICT_SCHEDULE_RISK_PROMPT.format(
            current_time=payload.current_time,
            technician_name=payload.technician.technician_name,
            current_job_id=current.job_id,
            started_at=current.started_at,
            duration=current.estimated_duration_minutes,
            current_lat=current.location.latitude,
            current_lon=current.location.longitude,
            next_job_id=nxt.job_id,
            next_scheduled=next_scheduled,
            next_lat=nxt.location.latitude,
            next_lon=nxt.location.longitude,
        ),
        output_model=PredictScheduleRiskOutput,
    )


# --- Estimate travel distance ---


class EstimateTravelDistanceInput(CamelModel):
    start_location: Coordinates
    end_location: Coordinates


class EstimateTravelDistanceOutput(CamelModel):
    distance_km: float = Field(..., ge=0, description="Estimated driving distance")


async def estimate_travel_distance(
    payload: EstimateTravelDistanceInput, llm: BaseLLMService
) -> EstimateTravelDistanceOutput:
    return await run_prompt(
        llm,
        name="estimate_travel_distance",
        system=DISTANCE_SYSTEM_PROMPT,
        prompt=ESTIMATE_TRAVEL_DISTANCE_PROMPT.format(
            start_lat=payload.start_location.latitude,
            start_lon=payload.start_location.longitude,
            end_lat=payload.end_location.latitude,
            end_lon=payload.end_location.longitude,
        ),
        output_model=EstimateTravelDistanceOutput,
    )
