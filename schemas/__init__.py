"""
Pydantic schemas for request/response validation.
"""

from schemas.email import (
    GenerateEmailRequest,
    PlaceholderEditRequest,
    TextReplaceRequest,
    TokenizeRequest,
    SegmentResponse,
    TokenizeResponse,
    FormOptionsResponse,
)

__all__ = [
    # Request schemas
    "GenerateEmailRequest",
    "PlaceholderEditRequest",
    "TextReplaceRequest",
    "TokenizeRequest",

    # Response schemas
    "SegmentResponse",
    "TokenizeResponse",
    "FormOptionsResponse",
]
