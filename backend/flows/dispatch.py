"""Flows used when a job is created: priority, skills, parts, photo triage."""

from pydantic import Field

from flows.base import bullet_list, run_prompt
from llm import BaseLLMService
from llm.prompts.dispatch import (
    DISPATCHER_SYSTEM_PROMPT,
    SUGGEST_JOB_PARTS_PROMPT,
    SUGGEST_JOB_PRIORITY_PROMPT,
    SUGGEST_JOB_SKILLS_PROMPT,
    TRIAGE_JOB_PROMPT,
    TRIAGE_SYSTEM_PROMPT,
)
from models import CamelModel, JobPriority

# --- Priority ---


class SuggestJobPriorityInput(CamelModel):
    job_description: str = Field(..., min_length=1, max_length=5000)


class SuggestJobPriorityOutput(CamelModel):
    suggested_priority: JobPriority
    reasoning: str


async def suggest_job_priority(
    payload: SuggestJobPriorityInput, llm: BaseLLMService
) -> SuggestJobPriorityOutput:
    return await run_prompt(
        llm,
        name="suggest_job_priority",
        system=DISPATCHER_SYSTEM_PROMPT,
        prompt=SUGGEST_JOB_PRIORITY_PROMPT.format(
            job_description=payload.job_description
        ),
        output_model=SuggestJobPriorityOutput,
    )


# --- Skills ---


class SuggestJobSkillsInput(CamelModel):
    job_description: str = Field(..., min_length=1, max_length=5000)
    available_skills: list[str] = Field(..., description="All skills in the library")


class SuggestJobSkillsOutput(CamelModel):
    suggested_skills: list[str] = Field(
        default_factory=list, description="Skills drawn from the available list"
    )


async def suggest_job_skills(
    payload: SuggestJobSkillsInput, llm: BaseLLMService
) -> SuggestJobSkillsOutput:
    output = await run_prompt(
        llm,
        name="suggest_job_skills",
        system=DISPATCHER_SYSTEM_PROMPT,
        prompt=SUGGEST_JOB_SKILLS_PROMPT.format(
            job_description=payload.job_description,
            available_skills=bullet_list(payload.available_skills),
        ),
        output_model=SuggestJobSkillsOutput,
    )
    allowed = set(payload.available_skills)
    output.suggested_skills = [s for s in output.suggested_skills if s in allowed]
    return output


# --- Parts ---


class SuggestJobPartsInput(CamelModel):
    job_description: str = Field(..., min_length=1, max_length=5000)
    available_parts: list[str] = Field(..., description="All parts in the library")


class SuggestJobPartsOutput(CamelModel):
    suggested_parts: list[str] = Field(
        default_factory=list, description="Parts drawn from the available list"
    )


async def suggest_job_parts(
    payload: SuggestJobPartsInput, llm: BaseLLMService
) -> SuggestJobPartsOutput:
    output = await run_prompt(
        llm,
        name="suggest_job_parts",
        system=DISPATCHER_SYSTEM_PROMPT,
        prompt=SUGGEST_JOB_PARTS_PROMPT.format(
            job_description=payload.job_description,
            available_parts=bullet_list(payload.available_parts),
        ),
        output_model=SuggestJobPartsOutput,
    )
    allowed = set(payload.available_parts)
    output.suggested_parts = [p for p in output.suggested_parts if p in allowed]
    return output


# --- Triage ---


class TriageJobInput(CamelModel):
    job_description: str = Field(..., min_length=1, max_length=5000)
    customer_photos: list[str] = Field(
        ..., min_length=1, max_length=10, description="Public URLs of customer photos"
    )
    available_parts: list[str] = Field(default_factory=list)


class TriageJobOutput(CamelModel):
    identified_equipment: str = Field(..., description="Make/model or equipment type")
    suggested_parts: list[str] = Field(default_factory=list)
    repair_guide: str = Field(..., description="Step-by-step diagnostic guide")


async def triage_job(payload: TriageJobInput, llm: BaseLLMService) -> TriageJobOutput:
    """Analyze customer photos of broken equipment ahead of the visit."""
    return await run_prompt(
        llm,
        name="triage_job",
        system=TRIAGE_SYSTEM_PROMPT,
        prompt=TRIAGE_JOB_PROMPT.format(
            job_description=payload.job_description,
            photo_count=len(payload.customer_photos),
            available_parts=bullet_list(payload.available_parts),
        ),
        output_model=TriageJobOutput,
        images=payload.customer_photos,
    )
