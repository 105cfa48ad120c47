"""Report handlers."""

from apps.reports.handlers.analysis import (
    NO_FEEDBACK_SUMMARY,
    SummarizeFtfrActionInput,
    run_report_analysis_action,
    summarize_ftfr_action,
)

__all__ = [
    "NO_FEEDBACK_SUMMARY",
    "SummarizeFtfrActionInput",
    "run_report_analysis_action",
    "summarize_ftfr_action",
]
