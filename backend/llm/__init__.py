"""LLM module - unified interface for language model interactions.

Usage:
    from llm import LLMService, LLMError

    llm = LLMService()
    result = await llm.generate_structured_output(prompt, system, name, schema)

Structure:
    - base.py: Abstract interface (BaseLLMService)
    - anthropic.py: Claude implementation (AnthropicService)
    - prompts/: One template module per flow
"""

from llm.anthropic import AnthropicService
from llm.base import BaseLLMService, LLMError

# Default provider - can be swapped by changing this alias
LLMService = AnthropicService

__all__ = [
    "AnthropicService",
    "BaseLLMService",
    "LLMError",
    "LLMService",
]
