"""Job document schema."""

from datetime import datetime
from enum import Enum

from pydantic import Field

from models.common import CamelModel, Location


class JobStatus(str, Enum):
    DRAFT = "Draft"
    UNASSIGNED = "Unassigned"
    ASSIGNED = "Assigned"
    EN_ROUTE = "En Route"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    PENDING_INVOICE = "Pending Invoice"
    FINISHED = "Finished"
    CANCELLED = "Cancelled"


class JobPriority(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class JobFlexibility(str, Enum):
    FIXED = "fixed"
    FLEXIBLE = "flexible"
    SOFT_WINDOW = "soft_window"


# Statuses in which a job occupies its technician
ACTIVE_STATUSES = frozenset(
    {JobStatus.ASSIGNED, JobStatus.EN_ROUTE, JobStatus.IN_PROGRESS}
)


# Statuses after which the assigned technician is free again
TERMINAL_STATUSES = frozenset(
    {JobStatus.COMPLETED, JobStatus.CANCELLED, JobStatus.FINISHED}
)

# Timestamp field stamped when a job enters a status
STATUS_TIMESTAMP_FIELDS: dict[JobStatus, str] = {
    JobStatus.EN_ROUTE: "enRouteAt",
    JobStatus.IN_PROGRESS: "inProgressAt",
    JobStatus.COMPLETED: "completedAt",
    JobStatus.FINISHED: "finishedAt",
}


class Job(CamelModel):
    """A unit of field work for a customer.

    Path: artifacts/{app_id}/public/data/jobs/{job_id}
    """

    id: str = ""
    company_id: str | None = None
    title: str
    description: str = ""
    priority: JobPriority = JobPriority.MEDIUM
    status: JobStatus = JobStatus.UNASSIGNED
    customer_name: str = ""
    customer_phone: str = ""
    customer_email: str | None = None
    location: Location
    scheduled_time: str | None = None
    estimated_duration_minutes: int | None = None
    quoted_value: float | None = None
    expected_parts_cost: float | None = None
    required_skills: list[str] = Field(default_factory=list)
    required_parts: list[str] = Field(default_factory=list)
    assigned_technician_id: str | None = None
    notes: list[str] = Field(default_factory=list)
    photos: list[str] = Field(default_factory=list)
    is_first_time_fix: bool | None = None
    reason_for_follow_up: str | None = None
    sla_deadline: str | None = None
    flexibility: JobFlexibility = JobFlexibility.FLEXIBLE
    dispatch_locked: bool = False
    # Link tokens and their ISO 8601 expiries
    tracking_token: str | None = None
    tracking_token_expires_at: str | None = None
    triage_token: str | None = None
    triage_token_expires_at: str | None = None
    en_route_at: datetime | None = None
    in_progress_at: datetime | None = None
    completed_at: datetime | None = None
    finished_at: datetime | None = None
    customer_signature_url: str | None = None
    customer_signature_timestamp: str | None = None
    customer_satisfaction_score: float | None = None
    triage_images: list[str] = Field(default_factory=list)
    ai_identified_model: str | None = None
    ai_suggested_parts: list[str] = Field(default_factory=list)
    ai_repair_guide: str | None = None
    travel_distance_km: float | None = None
    co2_emissions_kg: float | None = None

    @property
    def invoice_total(self) -> float:
        """Quoted value plus expected parts cost."""
        return (self.quoted_value or 0) + (self.expected_parts_cost or 0)
