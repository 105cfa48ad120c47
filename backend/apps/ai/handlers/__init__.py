"""AI handlers."""

from apps.ai.handlers.dispatch import (
    suggest_job_parts_action,
    suggest_job_priority_action,
    suggest_job_skills_action,
    triage_job_action,
)
from apps.ai.handlers.field import (
    generate_customer_notification_action,
    troubleshoot_equipment_action,
)
from apps.ai.handlers.schedule_health import check_schedule_health
from apps.ai.handlers.scheduling import (
    estimate_travel_distance_action,
    predict_next_available_technicians_action,
    predict_schedule_risk_action,
    suggest_schedule_time_action,
)
from apps.ai.handlers.travel_metrics import calculate_travel_metrics

__all__ = [
    "calculate_travel_metrics",
    "check_schedule_health",
    "estimate_travel_distance_action",
    "generate_customer_notification_action",
    "predict_next_available_technicians_action",
    "predict_schedule_risk_action",
    "suggest_job_parts_action",
    "suggest_job_priority_action",
    "suggest_job_skills_action",
    "suggest_schedule_time_action",
    "triage_job_action",
    "troubleshoot_equipment_action",
]
