"""Job routes - registers all job endpoints."""

from fastapi import APIRouter

from apps.jobs.handlers import (
    add_documentation,
    confirm_fleet_optimization,
    confirm_manual_reschedule,
    create_job,
    delete_job_endpoint,
    download_invoice,
    generate_tracking_link,
    generate_triage_link,
    import_jobs,
    reassign_job,
    update_job_status,
)
from responses import ActionResult

router = APIRouter(prefix="/jobs", tags=["Jobs"])

# POST /jobs - Create job
router.post("", response_model=ActionResult)(create_job)

# POST /jobs/import - Bulk import
router.post("/import", response_model=ActionResult)(import_jobs)

# PATCH /jobs/status - Change status
router.patch("/status", response_model=ActionResult)(update_job_status)

# POST /jobs/documentation - On-site documentation
router.post("/documentation", response_model=ActionResult)(add_documentation)

# POST /jobs/reassign - Reassign technician
router.post("/reassign", response_model=ActionResult)(reassign_job)

# POST /jobs/tracking-link - Customer tracking link
router.post("/tracking-link", response_model=ActionResult)(generate_tracking_link)

# POST /jobs/triage-link - Customer photo triage link
router.post("/triage-link", response_model=ActionResult)(generate_triage_link)

# POST /jobs/reschedule - Manual reschedule by the dispatcher
router.post("/reschedule", response_model=ActionResult)(confirm_manual_reschedule)

# POST /jobs/optimization - Apply accepted fleet optimization changes
router.post("/optimization", response_model=ActionResult)(confirm_fleet_optimization)

# GET /jobs/{job_id}/invoice - Invoice PDF
router.get("/{job_id}/invoice")(download_invoice)

# DELETE /jobs/{job_id} - Delete job
router.delete("/{job_id}", response_model=ActionResult)(delete_job_endpoint)
