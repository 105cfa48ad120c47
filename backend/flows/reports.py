"""Reporting flows: first-time-fix feedback summary and KPI analysis."""

from pydantic import Field

from flows.base import bullet_list, run_prompt
from llm import BaseLLMService
from llm.prompts.reports import (
    ANALYST_SYSTEM_PROMPT,
    FEATURES_KNOWLEDGE_BASE,
    RUN_REPORT_ANALYSIS_PROMPT,
    SUMMARIZE_FTFR_PROMPT,
)
from models import CamelModel

# --- First-time-fix feedback ---


class SummarizeFtfrInput(CamelModel):
    notes: list[str] = Field(..., min_length=1, description="Technician follow-up notes")


class SummarizeFtfrOutput(CamelModel):
    summary: str
    themes: list[str] = Field(default_factory=list)


async def summarize_ftfr(
    payload: SummarizeFtfrInput, llm: BaseLLMService
) -> SummarizeFtfrOutput:
    return await run_prompt(
        llm,
        name="summarize_ftfr",
        system=ANALYST_SYSTEM_PROMPT,
        prompt=SUMMARIZE_FTFR_PROMPT.format(notes=bullet_list(payload.notes)),
        output_model=SummarizeFtfrOutput,
    )


# --- KPI analysis ---


class TopTechnician(CamelModel):
    name: str
    margin: float


class KpiData(CamelModel):
    total_jobs: int = Field(..., ge=0)
    completed_jobs: int = Field(..., ge=0)
    ftfr: float = Field(..., ge=0, le=100, description="First-time-fix rate, percent")
    on_time_arrival_rate: float = Field(..., ge=0, le=100)
    avg_satisfaction: float = Field(..., ge=0, le=5)
    avg_duration: str
    avg_travel_time: str
    avg_time_to_assign: str
    avg_jobs_per_tech: float = Field(..., ge=0)
    sla_misses: int = Field(..., ge=0)
    total_profit: float = 0
    ai_influenced_profit: float = 0
    ai_assisted_assignments: int = Field(0, ge=0)
    total_upsell_revenue: float = 0
    top_technician_by_profit: TopTechnician | None = None


class RunReportAnalysisInput(CamelModel):
    kpi_data: KpiData


class RunReportAnalysisOutput(CamelModel):
    key_insights: str
    actionable_suggestions: list[str] = Field(default_factory=list)
    quick_wins: list[str] = Field(default_factory=list)


def format_kpis(kpis: KpiData) -> str:
    top = kpis.top_technician_by_profit
    return bullet_list(
        [
            f"Total Jobs: {kpis.total_jobs}",
            f"Completed Jobs: {kpis.completed_jobs}",
            f"First-Time-Fix Rate (FTFR): {kpis.ftfr}%",
            f"On-Time Arrival Rate: {kpis.on_time_arrival_rate}%",
            f"Average Customer Satisfaction: {kpis.avg_satisfaction} / 5",
            f"Average On-Site Duration per Job: {kpis.avg_duration}",
            f"Average Travel Time per Job: {kpis.avg_travel_time}",
            f"Average Time to Assign a Job: {kpis.avg_time_to_assign}",
            f"Average Jobs per Technician: {kpis.avg_jobs_per_tech}",
            f"SLA Misses: {kpis.sla_misses}",
            f"Fleet-wide Profit: ${kpis.total_profit:,.2f}",
            f"AI-Influenced Profit: ${kpis.ai_influenced_profit:,.2f} "
            f"(from {kpis.ai_assisted_assignments} jobs)",
            f"AI-Suggested Upsell Revenue: ${kpis.total_upsell_revenue:,.2f}",
            "Top Technician by Margin: "
            + (f"{top.name} (${top.margin:,.2f})" if top else "N/A"),
        ]
    )


async def run_report_analysis(
    payload: RunReportAnalysisInput, llm: BaseLLMService
) -> RunReportAnalysisOutput:
    return await run_prompt(
        llm,
        name="run_report_analysis",
        system=ANALYST_SYSTEM_PROMPT,
        prompt=RUN_REPORT_ANALYSIS_PROMPT.format(
            features=FEATURES_KNOWLEDGE_BASE, kpis=format_kpis(payload.kpi_data)
        ),
        output_model=RunReportAnalysisOutput,
    )
