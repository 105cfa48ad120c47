"""POST /ai/* - On-site troubleshooting and customer messages."""

from fastapi import Depends

from apps.ai.helpers import run_flow_action
from dependencies import get_llm_service
from flows import (
    GenerateCustomerNotificationInput,
    TroubleshootEquipmentInput,
    generate_customer_notification,
    troubleshoot_equipment,
)
from llm import BaseLLMService
from responses import ActionResult


async def troubleshoot_equipment_action(
    payload: TroubleshootEquipmentInput,
    llm: BaseLLMService = Depends(get_llm_service),
) -> ActionResult:
    return await run_flow_action(
        payload,
        TroubleshootEquipmentInput,
        troubleshoot_equipment,
        llm,
        failure="Failed to get troubleshooting steps. Please try again.",
    )


async def generate_customer_notification_action(
    payload: GenerateCustomerNotificationInput,
    llm: BaseLLMService = Depends(get_llm_service),
) -> ActionResult:
    return await run_flow_action(
        payload,
        GenerateCustomerNotificationInput,
        generate_customer_notification,
        llm,
        failure="Failed to generate the customer message. Please try again.",
    )
