"""Shared plumbing for AI flows.

A flow renders a prompt template, asks the LLM for output matching the
output model's JSON schema, and validates the result. No retries.
"""

import logging
from collections.abc import Iterable, Sequence
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from llm import BaseLLMService, LLMError

logger = logging.getLogger(__name__)

OutputT = TypeVar("OutputT", bound=BaseModel)


def bullet_list(items: Iterable[str], empty: str = "None") -> str:
    """Render items as ``- item`` lines."""
    lines = [f"- {item}" for item in items]
    return "\n".join(lines) if lines else empty


async def run_prompt(
    llm: BaseLLMService,
    *,
    name: str,
    system: str,
    prompt: str,
    output_model: type[OutputT],
    images: Sequence[str] = (),
) -> OutputT:
    """Execute one prompt/response exchange and parse the output.

    Raises:
        LLMError: If the provider fails or the output does not match the model.
    """
    logger.info("Running flow %s", name)
    raw = await llm.generate_structured_output(
        prompt,
        system,
        tool_name=name,
        tool_schema=output_model.model_json_schema(by_alias=True),
        images=images,
    )

    try:
        return output_model.model_validate(raw)
    except ValidationError as e:
        logger.error("Flow %s returned invalid output: %s", name, e)
        raise LLMError(f"Flow '{name}' returned invalid output") from e
