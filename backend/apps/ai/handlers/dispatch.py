"""POST /ai/* - Suggestions made while a job is being created."""

from fastapi import Depends

from apps.ai.helpers import run_flow_action
from dependencies import get_llm_service
from flows import (
    SuggestJobPartsInput,
    SuggestJobPriorityInput,
    SuggestJobSkillsInput,
    TriageJobInput,
    suggest_job_parts,
    suggest_job_priority,
    suggest_job_skills,
    triage_job,
)
from llm import BaseLLMService
from responses import ActionResult


async def suggest_job_priority_action(
    payload: SuggestJobPriorityInput,
    llm: BaseLLMService = Depends(get_llm_service),
) -> ActionResult:
    return await run_flow_action(
        payload,
        SuggestJobPriorityInput,
        suggest_job_priority,
        llm,
        failure="Failed to suggest job priority. Please try again.",
    )


async def suggest_job_skills_action(
    payload: SuggestJobSkillsInput,
    llm: BaseLLMService = Depends(get_llm_service),
) -> ActionResult:
    return await run_flow_action(
        payload,
        SuggestJobSkillsInput,
        suggest_job_skills,
        llm,
        failure="Failed to suggest skills. Please try again.",
    )


async def suggest_job_parts_action(
    payload: SuggestJobPartsInput,
    llm: BaseLLMService = Depends(get_llm_service),
) -> ActionResult:
    return await run_flow_action(
        payload,
        SuggestJobPartsInput,
        suggest_job_parts,
        llm,
        failure="Failed to suggest parts. Please try again.",
    )


async def triage_job_action(
    payload: TriageJobInput,
    llm: BaseLLMService = Depends(get_llm_service),
) -> ActionResult:
    return await run_flow_action(
        payload,
        TriageJobInput,
        triage_job,
        llm,
        failure="Failed to analyze the photos. Please try again.",
    )
