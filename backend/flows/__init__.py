"""AI flows: typed input, templated prompt, structured output."""

from flows.dispatch import (
    SuggestJobPartsInput,
    SuggestJobPartsOutput,
    SuggestJobPriorityInput,
    SuggestJobPriorityOutput,
    SuggestJobSkillsInput,
    SuggestJobSkillsOutput,
    TriageJobInput,
    TriageJobOutput,
    suggest_job_parts,
    suggest_job_priority,
    suggest_job_skills,
    triage_job,
)
from flows.field import (
    GenerateCustomerNotificationInput,
    GenerateCustomerNotificationOutput,
    TroubleshootEquipmentInput,
    TroubleshootEquipmentOutput,
    generate_customer_notification,
    troubleshoot_equipment,
)
from flows.reports import (
    KpiData,
    RunReportAnalysisInput,
    RunReportAnalysisOutput,
    SummarizeFtfrInput,
    SummarizeFtfrOutput,
    run_report_analysis,
    summarize_ftfr,
)
from flows.scheduling import (
    EstimateTravelDistanceInput,
    EstimateTravelDistanceOutput,
    PredictNextAvailableTechniciansInput,
    PredictNextAvailableTechniciansOutput,
    PredictScheduleRiskInput,
    PredictScheduleRiskOutput,
    SuggestScheduleTimeInput,
    SuggestScheduleTimeOutput,
    estimate_travel_distance,
    predict_next_available_technicians,
    predict_schedule_risk,
    suggest_schedule_time,
)

__all__ = [
    "EstimateTravelDistanceInput",
    "EstimateTravelDistanceOutput",
    "GenerateCustomerNotificationInput",
    "GenerateCustomerNotificationOutput",
    "KpiData",
    "PredictNextAvailableTechniciansInput",
    "PredictNextAvailableTechniciansOutput",
    "PredictScheduleRiskInput",
    "PredictScheduleRiskOutput",
    "RunReportAnalysisInput",
    "RunReportAnalysisOutput",
    "SuggestJobPartsInput",
    "SuggestJobPartsOutput",
    "SuggestJobPriorityInput",
    "SuggestJobPriorityOutput",
    "SuggestJobSkillsInput",
    "SuggestJobSkillsOutput",
    "SuggestScheduleTimeInput",
    "SuggestScheduleTimeOutput",
    "SummarizeFtfrInput",
    "SummarizeFtfrOutput",
    "TriageJobInput",
    "TriageJobOutput",
    "TroubleshootEquipmentInput",
    "TroubleshootEquipmentOutput",
    "estimate_travel_distance",
    "generate_customer_notification",
    "predict_next_available_technicians",
    "predict_schedule_risk",
    "run_report_analysis",
    "suggest_job_parts",
    "suggest_job_priority",
    "suggest_job_skills",
    "suggest_schedule_time",
    "summarize_ftfr",
    "troubleshoot_equipment",
    "triage_job",
]
