"""Base LLM service interface.

Defines the contract that all LLM providers must implement.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence


class LLMError(Exception):
    """Raised when LLM generation fails."""


class BaseLLMService(ABC):
    """Abstract base class for LLM services.

    Flows only need structured output, so that is the whole contract.
    """

    @abstractmethod
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
        """Generate structured JSON output using tool/function calling.

        Args:
            prompt: User message.
            system: System instructions.
            tool_name: Name of the tool.
            tool_schema: JSON schema for the output.
            images: Public image URLs sent along with the prompt.
            model: Override model name.
            temperature: Sampling temperature.
            max_tokens: Maximum tokens.

        Returns:
            Parsed JSON matching the schema.
        """
