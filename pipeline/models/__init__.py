"""
Models package for pipeline models

Field Model, segments and the in-memory state passed between steps.
"""

from .fields import (
    EmailFields,
    Sender,
    Intent,
    Recipient,
    LeaveDetails,
    Modifiers,
    Footer,
    Freeform,
    Tone,
    Honorific,
    Relationship,
)
from .segments import Literal, Placeholder, Segment
from .core import (
    GENERATION_ERROR_BODY,
    GeneratedDocument,
    GenerationData,
    StepResult,
)

__all__ = [
    # Field Model
    "EmailFields",
    "Sender",
    "Intent",
    "Recipient",
    "LeaveDetails",
    "Modifiers",
    "Footer",
    "Freeform",
    "Tone",
    "Honorific",
    "Relationship",

    # Segments
    "Literal",
    "Placeholder",
    "Segment",

    # Core data models
    "GENERATION_ERROR_BODY",
    "GeneratedDocument",
    "GenerationData",
    "StepResult",
]
