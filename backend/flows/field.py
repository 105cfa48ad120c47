"""Flows for technicians on site and for customer messages."""

from pydantic import Field, model_validator

from flows.base import run_prompt
from llm import BaseLLMService
from llm.prompts.field import (
    CUSTOMER_NOTIFICATION_PROMPT,
    CUSTOMER_SERVICE_SYSTEM_PROMPT,
    DELAY_SITUATION,
    RESCHEDULE_SITUATION,
    TECHNICAL_SYSTEM_PROMPT,
    TROUBLESHOOT_PROMPT,
)
from models import CamelModel

# --- Troubleshooting ---


class TroubleshootEquipmentInput(CamelModel):
    query: str = Field(..., min_length=1, max_length=5000)
    knowledge_base: str | None = Field(
        None, description="Internal reference text to prefer over general knowledge"
    )


class TroubleshootEquipmentOutput(CamelModel):
    steps: list[str] = Field(..., min_length=1)
    disclaimer: str


async def troubleshoot_equipment(
    payload: TroubleshootEquipmentInput, llm: BaseLLMService
) -> TroubleshootEquipmentOutput:
    kb_section = ""
    if payload.knowledge_base:
        kb_section = (
            "\nUse the following internal knowledge base as your primary reference:\n"
            f"---\n{payload.knowledge_base}\n---\n"
        )
    return await run_prompt(
        llm,
        name="troubleshoot_equipment",
        system=TECHNICAL_SYSTEM_PROMPT,
        prompt=TROUBLESHOOT_PROMPT.format(
            query=payload.query, knowledge_base_section=kb_section
        ),
        output_model=TroubleshootEquipmentOutput,
    )


# --- Customer notification ---


class GenerateCustomerNotificationInput(CamelModel):
    """Either ``delay_minutes`` (delay alert) or ``new_time`` (reschedule)."""

    customer_name: str = Field(..., min_length=1)
    technician_name: str = Field(..., min_length=1)
    job_title: str | None = None
    delay_minutes: int | None = Field(None, gt=0)
    new_time: str | None = None
    reason_for_change: str | None = None

    @model_validator(mode="after")
    def check_situation(self) -> "GenerateCustomerNotificationInput":
        if self.delay_minutes is None and not self.new_time:
            raise ValueError("Either delayMinutes or newTime is required")
        return self


class GenerateCustomerNotificationOutput(CamelModel):
    message: str = Field(..., min_length=1)


async def generate_customer_notification(
    payload: GenerateCustomerNotificationInput, llm: BaseLLMService
) -> GenerateCustomerNotificationOutput:
    job_reference = f' for "{payload.job_title}"' if payload.job_title else ""

    situations = []
    if payload.delay_minutes is not None:
        situations.append(
            DELAY_SITUATION.format(
                delay_minutes=payload.delay_minutes,
                job_reference=job_reference,
                technician_name=payload.technician_name,
            )
        )
    if payload.new_time:
        situations.append(
            RESCHEDULE_SITUATION.format(
                new_time=payload.new_time, job_reference=job_reference
            )
        )

    reason = ""
    if payload.reason_for_change:
        reason = (
            "Include this reason in the message in a customer-friendly way: "
            f'"{payload.reason_for_change}"\n'
        )

    return await run_prompt(
        llm,
        name="generate_customer_notification",
        system=CUSTOMER_SERVICE_SYSTEM_PROMPT,
        prompt=CUSTOMER_NOTIFICATION_PROMPT.format(
            customer_name=payload.customer_name,
            technician_name=payload.technician_name,
            job_line=f"- Job: {payload.job_title}" if payload.job_title else "",
            situation="\n\n".join(situations),
            reason_section=reason,
        ),
        output_model=GenerateCustomerNotificationOutput,
    )
