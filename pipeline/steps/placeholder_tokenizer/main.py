"""
Placeholder Tokenizer Step - Step 4

Tokenizes the generated subject and body independently and resolves
"[Your Name]" to the sender's name.
"""

import logfire

from pipeline.core.runner import BasePipelineStep
from pipeline.models.core import GenerationData, StepResult
from pipeline.models.segments import Placeholder, join_segments

from .utils import tokenize


class PlaceholderTokenizerStep(BasePipelineStep):
    """
    Step 4: Tokenize subject and body.

    Updates GenerationData fields:
    - subject_segments / body_segments: List[Segment]
    - subject / body: rewritten with the sender name resolved
    """

    def __init__(self):
        super().__init__(step_name="placeholder_tokenizer")

    async def _execute_step(self, data: GenerationData) -> StepResult:
        sender_name = data.fields.sender.name

        data.subject_segments = tokenize(data.subject, sender_name)
        data.body_segments = tokenize(data.body, sender_name)

        # Canonical strings carry the resolved sender name from here on
        data.subject = join_segments(data.subject_segments)
        data.body = join_segments(data.body_segments)

        placeholder_count = sum(
            isinstance(segment, Placeholder)
            for segment in data.subject_segments + data.body_segments
        )

        logfire.info(
            "Generated email tokenized",
            task_id=data.task_id,
            placeholder_count=placeholder_count,
            segment_count=len(data.subject_segments) + len(data.body_segments)
        )

        return StepResult(
            success=True,
            step_name=self.step_name,
            metadata={"placeholder_count": placeholder_count}
        )
