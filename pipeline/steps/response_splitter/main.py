"""
Response Splitter Step - Step 3

Parses the service's free-form completion into subject and body.
"""

import logfire

from pipeline.core.runner import BasePipelineStep
from pipeline.models.core import GenerationData, StepResult

from .utils import SECTION_SEPARATOR, SUBJECT_PREFIX, split_response


class ResponseSplitterStep(BasePipelineStep):
    """
    Step 3: Split the raw response.

    Contract violations by the service (no separator, no "Subject: "
    prefix) are reported as warnings, never as failures.

    Updates GenerationData fields:
    - subject: str
    - body: str
    """

    def __init__(self):
        super().__init__(step_name="response_splitter")

    async def _execute_step(self, data: GenerationData) -> StepResult:
        data.subject, data.body = split_response(data.raw_response)

        warnings = []
        if SECTION_SEPARATOR not in data.raw_response:
            warnings.append("Response has no blank line; using it all as the body")
        elif not data.raw_response.startswith(SUBJECT_PREFIX):
            warnings.append("Response has no 'Subject: ' prefix")

        if warnings:
            logfire.warning(
                "Generation response did not follow the output format",
                task_id=data.task_id,
                warnings=warnings
            )

        return StepResult(
            success=True,
            step_name=self.step_name,
            metadata={
                "subject_length": len(data.subject),
                "body_length": len(data.body)
            },
            warnings=warnings
        )
