"""Core data models for the email generation pipeline."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, List
from datetime import datetime, timezone

from pipeline.models.fields import EmailFields
from pipeline.models.segments import Segment


GENERATION_ERROR_BODY = "An error occurred while generating the email. Please try again."


@dataclass(frozen=True)
class GeneratedDocument:
    """
    Result of one generation cycle.

    Wholly replaces any previous document; never merged.
    """

    subject: str
    body: str

    @classmethod
    def failed(cls) -> "GeneratedDocument":
        """Sentinel document shown when the generation service fails."""
        return cls(subject="", body=GENERATION_ERROR_BODY)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class GenerationData:
    """
    In-memory state passed between pipeline steps. Not persisted.

    Each step fills in its outputs; the orchestrator reads the final
    subject/body once the runner completes.
    """

    # Input data
    task_id: str
    """Generation cycle ID - used for correlation in Logfire"""

    fields: EmailFields
    """Structured intent supplied by the form layer"""

    # Step 1 outputs (RequestBuilder)
    prompt: str = ""
    """Generation request handed to the service"""

    # Step 2 outputs (Completion)
    raw_response: str = ""
    """Unparsed text returned by the generation service"""

    # Step 3 outputs (ResponseSplitter)
    subject: str = ""
    body: str = ""

    # Step 4 outputs (PlaceholderTokenizer)
    subject_segments: List[Segment] = field(default_factory=list)
    body_segments: List[Segment] = field(default_factory=list)

    # Transient data (logged to Logfire, not persisted)
    started_at: datetime = field(default_factory=_utcnow)
    """Pipeline start time"""

    step_timings: Dict[str, float] = field(default_factory=dict)
    """
    Duration of each step in seconds.
    Example: {"request_builder": 0.0001, "completion": 2.3, ...}
    """

    errors: List[str] = field(default_factory=list)
    """Errors recorded by failed steps"""

    # ===================================================================
    # HELPER METHODS
    # ===================================================================

    def total_duration(self) -> float:
        """Calculate total pipeline execution time in seconds"""
        return (_utcnow() - self.started_at).total_seconds()

    def add_timing(self, step_name: str, duration: float) -> None:
        """Record step timing"""
        self.step_timings[step_name] = duration

    def add_error(self, step_name: str, error_message: str) -> None:
        """Record step error"""
        self.errors.append(f"{step_name}: {error_message}")

    def to_document(self) -> GeneratedDocument:
        return GeneratedDocument(subject=self.subject, body=self.body)


# ===================================================================
# STEP RESULT
# ===================================================================

@dataclass
class StepResult:
    """
    Result of a pipeline step execution.

    Returned by BasePipelineStep.execute() to indicate success/failure.
    """

    success: bool
    """Whether the step completed successfully"""

    step_name: str
    """Name of the step that produced this result"""

    error: Optional[str] = None
    """Error message if success=False"""

    metadata: Optional[Dict[str, Any]] = None
    """
    Optional metadata about execution:
    - duration: float (seconds)
    - output_size: int (chars)
    """

    warnings: List[str] = field(default_factory=list)
    """Non-fatal warnings (e.g., 'response had no Subject: prefix')"""

    def __post_init__(self):
        """Validation: if success=False, error must be set"""
        if not self.success and not self.error:
            raise ValueError("StepResult with success=False must have error message")
