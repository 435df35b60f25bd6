"""
Generation Orchestrator

Drives one generation cycle and hands the result to an editing session.
Failures never propagate: they are logged and turned into the sentinel
document.
"""

from typing import Optional
from uuid import uuid4

import logfire

from pipeline import create_generation_pipeline
from pipeline.core.exceptions import PipelineExecutionError
from pipeline.editing.session import EditingSession
from pipeline.models.core import GeneratedDocument, GenerationData
from pipeline.models.fields import EmailFields
from services.generation import GenerationService


class GenerationOrchestrator:
    """
    Runs generation cycles against one generation service.

    Cycles are independent; two cycles for the same session may overlap and
    whichever finishes last overwrites the session's document.
    """

    def __init__(self, service: GenerationService):
        self.service = service

    async def generate(
        self,
        fields: EmailFields,
        session: Optional[EditingSession] = None,
        task_id: Optional[str] = None,
    ) -> GeneratedDocument:
        """
        Run one generation cycle.

        Args:
            fields: Structured intent; nothing is validated
            session: Editing session whose document is replaced on completion
            task_id: Correlation ID for logs (generated when omitted)

        Returns:
            The generated document, or the sentinel document on failure
        """
        data = GenerationData(task_id=task_id or str(uuid4()), fields=fields)
        runner = create_generation_pipeline(self.service)

        try:
            await runner.run(data)
            document = data.to_document()
        except PipelineExecutionError as e:
            logfire.error(
                "Email generation failed",
                task_id=data.task_id,
                error=str(e),
                error_type=type(e).__name__,
                step_errors=data.errors
            )
            document = GeneratedDocument.failed()

        if session is not None:
            session.load(document, sender_name=fields.sender.name)
            logfire.info(
                "Editing session updated",
                task_id=data.task_id,
                session_id=session.session_id
            )

        return document
