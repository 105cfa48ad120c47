"""AI routes - registers all AI helper endpoints."""

from fastapi import APIRouter

from apps.ai.handlers import (
    calculate_travel_metrics,
    check_schedule_health,
    estimate_travel_distance_action,
    generate_customer_notification_action,
    predict_next_available_technicians_action,
    predict_schedule_risk_action,
    suggest_job_parts_action,
    suggest_job_priority_action,
    suggest_job_skills_action,
    suggest_schedule_time_action,
    triage_job_action,
    troubleshoot_equipment_action,
)
from responses import ActionResult

router = APIRouter(prefix="/ai", tags=["AI"])

# Job creation
router.post("/suggest-priority", response_model=ActionResult)(
    suggest_job_priority_action
)
router.post("/suggest-skills", response_model=ActionResult)(suggest_job_skills_action)
router.post("/suggest-parts", response_model=ActionResult)(suggest_job_parts_action)
router.post("/triage", response_model=ActionResult)(triage_job_action)

# Scheduling
router.post("/suggest-schedule-time", response_model=ActionResult)(
    suggest_schedule_time_action
)
router.post("/predict-next-technicians", response_model=ActionResult)(
    predict_next_available_technicians_action
)
router.post("/predict-schedule-risk", response_model=ActionResult)(
    predict_schedule_risk_action
)
router.post("/travel-distance", response_model=ActionResult)(
    estimate_travel_distance_action
)
router.post("/schedule-health", response_model=ActionResult)(check_schedule_health)
router.post("/travel-metrics", response_model=ActionResult)(calculate_travel_metrics)

# Field
router.post("/troubleshoot", response_model=ActionResult)(
    troubleshoot_equipment_action
)
router.post("/customer-notification", response_model=ActionResult)(
    generate_customer_notification_action
)
