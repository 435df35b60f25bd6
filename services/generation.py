"""
Generation service: the external text-completion collaborator.

The engine only needs "prompt string in, completion string out". The default
implementation drives a pydantic-ai agent, so the provider (Gemini,
Anthropic, ...) is chosen by the ``generation_model`` setting.
"""

from typing import Optional, Protocol, Union

import logfire
from pydantic_ai import Agent
from pydantic_ai.models import Model

from config import settings
from pipeline.steps.request_builder.prompts import SYSTEM_PROMPT
from utils.llm_agent import create_agent


class GenerationService(Protocol):
    """Anything that can turn a generation request into completion text."""

    async def complete(self, prompt: str) -> str:
        ...


class PydanticAIGenerationService:
    """
    Generation service backed by a pydantic-ai agent.

    The agent is created on first use, so a missing provider key surfaces as
    a failed generation cycle rather than an import-time error.
    """

    def __init__(
        self,
        model: Union[str, Model, None] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        retries: Optional[int] = None,
    ):
        self.model = model or settings.generation_model
        self.temperature = settings.generation_temperature if temperature is None else temperature
        self.max_tokens = max_tokens or settings.generation_max_tokens
        self.retries = settings.generation_retries if retries is None else retries
        self._agent: Optional[Agent[None, str]] = None

    @property
    def agent(self) -> Agent[None, str]:
        if self._agent is None:
            self._agent = create_agent(
                model=self.model,
                system_prompt=SYSTEM_PROMPT,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
                retries=self.retries,
            )
        return self._agent

    async def complete(self, prompt: str) -> str:
        """
        Send one request and return the raw completion text.

        Raises:
            Whatever the provider raises; the orchestrator absorbs it.
        """
        with logfire.span("generation_service.complete", prompt_length=len(prompt)):
            result = await self.agent.run(prompt)
            return result.output


# Global singleton instance
_generation_service: Optional[GenerationService] = None


def get_generation_service() -> GenerationService:
    """
    Get or create the generation service singleton.

    Returns:
        GenerationService: configured from settings
    """
    global _generation_service

    if _generation_service is None:
        _generation_service = PydanticAIGenerationService()
        logfire.info("Generation service initialized", model=str(settings.generation_model))

    return _generation_service
