"""
Pydantic schemas for the email generation and editing API.

These models validate API requests and responses; the Field Model itself
(pipeline.models.fields.EmailFields) is accepted as-is.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, ConfigDict

from pipeline.models.fields import EmailFields


# ===================================================================
# REQUEST SCHEMAS
# ===================================================================

class GenerateEmailRequest(BaseModel):
    """
    Request body for POST /api/email/generate

    Runs one generation cycle. Without a session_id (or with an expired
    one) a new editing session is created.
    """

    session_id: Optional[str] = Field(
        default=None,
        max_length=100,
        description="Editing session to replace the document of"
    )

    fields: EmailFields = Field(
        default_factory=EmailFields,
        description="Structured intent; every field is optional"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "fields": {
                    "sender": {"name": "Alex"},
                    "intent": {"reason": "Project Update", "tone": "Friendly"},
                    "recipient": {"label": "Jordan", "honorific": "Name", "relationship": "Peer"},
                    "modifiers": {"has_attachment": True}
                }
            }
        }
    )


class PlaceholderEditRequest(BaseModel):
    """Request body for PUT /api/email/sessions/{id}/{field}/placeholders/{index}"""

    value: str = Field(..., max_length=500, description="New placeholder text")


class TextReplaceRequest(BaseModel):
    """Request body for PUT /api/email/sessions/{id}/{field}"""

    text: str = Field(..., max_length=20000, description="Whole subject or body, verbatim")


class TokenizeRequest(BaseModel):
    """Request body for POST /api/email/tokenize"""

    text: str = Field(..., max_length=20000)
    sender_name: str = Field(default="", description="Substituted for [Your Name]")


# ===================================================================
# RESPONSE SCHEMAS
# ===================================================================

class SegmentResponse(BaseModel):
    """One tokenized segment."""

    kind: str = Field(..., description="'literal' or 'placeholder'")
    text: str = Field(..., description="Literal text, or placeholder name without brackets")


class TokenizeResponse(BaseModel):
    segments: List[SegmentResponse]
    placeholders: List[str] = Field(description="Unique placeholder names in order")


class FormOptionsResponse(BaseModel):
    """Choices the form offers for the enumerated fields."""

    reasons: List[str]
    tones: List[str]
    honorifics: List[str]
    relationships: List[str]
    leave_reasons: List[str]
