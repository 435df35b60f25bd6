"""
Request Builder Step - Step 1

Turns the Field Model into the generation request string.
"""

import logfire

from pipeline.core.runner import BasePipelineStep
from pipeline.models.core import GenerationData, StepResult

from .prompts import create_generation_prompt


class RequestBuilderStep(BasePipelineStep):
    """
    Step 1: Build the generation request.

    Updates GenerationData fields:
    - prompt: str
    """

    def __init__(self):
        super().__init__(step_name="request_builder")

    async def _execute_step(self, data: GenerationData) -> StepResult:
        data.prompt = create_generation_prompt(data.fields)

        logfire.info(
            "Generation request built",
            task_id=data.task_id,
            prompt_length=len(data.prompt),
            leave_request=data.fields.intent.is_leave_request,
            has_attachment=data.fields.modifiers.has_attachment,
            footer_enabled=data.fields.modifiers.footer.enabled
        )

        return StepResult(
            success=True,
            step_name=self.step_name,
            metadata={"prompt_length": len(data.prompt)}
        )
