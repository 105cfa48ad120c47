"""Anthropic Claude LLM implementation."""

import logging
from collections.abc import Sequence
from typing import Any

import httpx
from anthropic import APIError, AsyncAnthropic, RateLimitError

from config import get_settings

from .base import BaseLLMService, LLMError

logger = logging.getLogger(__name__)


class AnthropicService(BaseLLMService):
    """Claude LLM service via Anthropic API."""

    def __init__(self, model: str | None = None) -> None:
        settings = get_settings()
        self.model = model or settings.llm_model
        self.settings = settings

        self._client = AsyncAnthropic(
            api_key=settings.anthropic_api_key,
            timeout=httpx.Timeout(timeout=settings.llm_timeout_seconds, connect=10.0),
        )

    @staticmethod
    def _build_content(prompt: str, images: Sequence[str]) -> list[dict[str, Any]]:
        content: list[dict[str, Any]] = [
            {"type": "image", "source": {"type": "url", "url": url}} for url in images
        ]
        content.append({"type": "text", "text": prompt})
        return content

    async def generate_structured_output(
        self,
        prompt: str,
        system: str,
        tool_name: str,
        tool_schema: dict,
        *,
        images: Sequence[str] = (),
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> dict:
        """Generate structured JSON using Claude's tool_use."""
        try:
            response = await self._client.messages.create(
                model=model or self.model,
                max_tokens=max_tokens or self.settings.llm_max_tokens,
                temperature=temperature
                if temperature is not None
                else self.settings.llm_temperature,
                system=system,
                messages=[
                    {"role": "user", "content": self._build_content(prompt, images)}
                ],
                tools=[
                    {
                        "name": tool_name,
                        "description": f"Structured output for {tool_name}",
                        "input_schema": tool_schema,
                    }
                ],
                tool_choice={"type": "tool", "name": tool_name},
            )

            for block in response.content:
                if block.type == "tool_use" and block.name == tool_name:
                    logger.debug("Tool '%s' called successfully", tool_name)
                    return block.input

            raise LLMError(f"Tool '{tool_name}' was not called")

        except RateLimitError as e:
            logger.warning("Rate limit: %s", e)
            raise LLMError("Rate limit exceeded.") from e
        except APIError as e:
            logger.error("API error: %s", e)
            raise LLMError(f"LLM error: {e}") from e
