"""POST /reports/* - Feedback summaries and KPI analysis."""

import logging
from typing import Any

from fastapi import Depends
from pydantic import ValidationError

from dependencies import get_llm_service
from flows import (
    RunReportAnalysisInput,
    SummarizeFtfrInput,
    SummarizeFtfrOutput,
    run_report_analysis,
    summarize_ftfr,
)
from llm import BaseLLMService
from models import CamelModel
from responses import ActionResult, action_failure, validation_failure

logger = logging.getLogger(__name__)

NO_FEEDBACK_SUMMARY = (
    "No feedback notes were found in the selected date range for failed "
    "first-time fixes."
)


class SummarizeFtfrActionInput(CamelModel):
    """Job documents as loaded by the reports page; only two fields are read."""

    jobs: list[dict[str, Any]]


def collect_follow_up_notes(jobs: list[dict[str, Any]]) -> list[str]:
    """Reasons given on jobs explicitly marked as not fixed first time."""
    return [
        job["reasonForFollowUp"]
        for job in jobs
        if job.get("isFirstTimeFix") is False
        and isinstance(job.get("reasonForFollowUp"), str)
        and job["reasonForFollowUp"].strip()
    ]


async def summarize_ftfr_action(
    payload: SummarizeFtfrActionInput,
    llm: BaseLLMService = Depends(get_llm_service),
) -> ActionResult:
    """Summarize why jobs needed a second visit.

    Without any notes a fixed summary is returned and the model is not called.
    """
    try:
        payload = SummarizeFtfrActionInput.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    notes = collect_follow_up_notes(payload.jobs)
    if not notes:
        empty = SummarizeFtfrOutput(summary=NO_FEEDBACK_SUMMARY, themes=[])
        return ActionResult(data=empty.to_document())

    try:
        output = await summarize_ftfr(SummarizeFtfrInput(notes=notes), llm)
        return ActionResult(data=output.to_document())
    except Exception as e:
        logger.exception("Error summarizing %d follow-up notes", len(notes))
        return action_failure("Failed to summarize feedback", e)


async def run_report_analysis_action(
    payload: RunReportAnalysisInput,
    llm: BaseLLMService = Depends(get_llm_service),
) -> ActionResult:
    try:
        payload = RunReportAnalysisInput.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    try:
        output = await run_report_analysis(payload, llm)
        return ActionResult(data=output.to_document())
    except Exception as e:
        logger.exception("Error running report analysis")
        return action_failure("Failed to run report analysis", e)
