"""Job handlers."""

from apps.jobs.handlers.assign_job import (
    DeleteJobInput,
    ReassignJobInput,
    delete_job,
    delete_job_endpoint,
    reassign_job,
)
from apps.jobs.handlers.create_job import (
    CreateJobInput,
    ImportJobsInput,
    create_job,
    import_jobs,
)
from apps.jobs.handlers.invoice import download_invoice, generate_invoice
from apps.jobs.handlers.schedule_changes import (
    ConfirmFleetOptimizationInput,
    ConfirmManualRescheduleInput,
    confirm_fleet_optimization,
    confirm_manual_reschedule,
)
from apps.jobs.handlers.tracking_link import (
    GenerateTrackingLinkInput,
    GenerateTriageLinkInput,
    generate_tracking_link,
    generate_triage_link,
)
from apps.jobs.handlers.update_job import (
    AddDocumentationInput,
    UpdateJobStatusInput,
    add_documentation,
    update_job_status,
)

__all__ = [
    "AddDocumentationInput",
    "ConfirmFleetOptimizationInput",
    "ConfirmManualRescheduleInput",
    "CreateJobInput",
    "DeleteJobInput",
    "GenerateTrackingLinkInput",
    "GenerateTriageLinkInput",
    "ImportJobsInput",
    "ReassignJobInput",
    "UpdateJobStatusInput",
    "add_documentation",
    "confirm_fleet_optimization",
    "confirm_manual_reschedule",
    "create_job",
    "delete_job",
    "delete_job_endpoint",
    "download_invoice",
    "generate_invoice",
    "generate_tracking_link",
    "generate_triage_link",
    "import_jobs",
    "reassign_job",
    "update_job_status",
]
