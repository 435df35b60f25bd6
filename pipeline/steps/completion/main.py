"""
Completion Step - Step 2

Sends the generation request to the external service.
"""

import logfire

from pipeline.core.exceptions import ExternalAPIError
from pipeline.core.runner import BasePipelineStep
from pipeline.models.core import GenerationData, StepResult
from services.generation import GenerationService


class CompletionStep(BasePipelineStep):
    """
    Step 2: Invoke the generation service.

    Any service error, and an empty completion, is raised as
    ExternalAPIError. No timeout or retry is applied here; the service owns
    that policy.

    Updates GenerationData fields:
    - raw_response: str
    """

    def __init__(self, service: GenerationService):
        super().__init__(step_name="completion")
        self.service = service

    async def _execute_step(self, data: GenerationData) -> StepResult:
        logfire.info(
            "Calling generation service",
            task_id=data.task_id,
            service=type(self.service).__name__
        )

        try:
            raw_response = await self.service.complete(data.prompt)
        except Exception as e:
            raise ExternalAPIError(f"Generation service failed: {str(e)}") from e

        if not raw_response or not raw_response.strip():
            raise ExternalAPIError("Generation service returned an empty response")

        data.raw_response = raw_response

        logfire.info(
            "Generation response received",
            task_id=data.task_id,
            response_length=len(raw_response)
        )

        return StepResult(
            success=True,
            step_name=self.step_name,
            metadata={"response_length": len(raw_response)}
        )
