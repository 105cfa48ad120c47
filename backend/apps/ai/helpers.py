"""Shared wrapper that exposes an AI flow as a server action."""

import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from llm import BaseLLMService
from models import CamelModel
from responses import ActionResult, validation_failure

logger = logging.getLogger(__name__)

InputT = TypeVar("InputT", bound=BaseModel)


async def run_flow_action(
    payload: BaseModel | dict[str, Any],
    input_model: type[InputT],
    flow: Callable[[InputT, BaseLLMService], Awaitable[CamelModel]],
    llm: BaseLLMService,
    *,
    failure: str,
) -> ActionResult:
    """Validate, run the flow and wrap its output.

    Provider and output errors are logged and replaced by ``failure``.
    """
    try:
        validated = input_model.model_validate(payload)
    except ValidationError as e:
        return validation_failure(e)

    try:
        output = await flow(validated, llm)
    except Exception:
        logger.exception("AI flow %s failed", flow.__name__)
        return ActionResult(error=failure)

    return ActionResult(data=output.to_document(mode="json"))
