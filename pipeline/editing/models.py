"""
Editing view models.

What the form layer receives for one document (subject or body) in each
view mode.
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class ViewMode(str, Enum):
    """Two-state view: placeholders highlighted, or placeholders as inputs."""
    DISPLAY = "display"
    EDIT = "edit"


class DocumentField(str, Enum):
    SUBJECT = "subject"
    BODY = "body"


class DisplaySpan(BaseModel):
    """A run of plain text, or a highlighted placeholder, in Display mode."""

    index: int = Field(description="Segment index in the tokenized document")
    kind: str = Field(description="'literal' or 'placeholder'")
    text: str = Field(description="Literal text, or the placeholder name without brackets")


class PlaceholderInput(BaseModel):
    """A bounded input field for one placeholder in Edit mode."""

    index: int = Field(description="Segment index to send back with the edit")
    value: str = Field(description="Current placeholder name, pre-filled")
    width: int = Field(description="Field width in characters")


class DocumentView(BaseModel):
    """
    Rendered view of one document.

    ``text`` is always the canonical string. Display mode fills ``spans``;
    Edit mode fills ``inputs`` and the client shows ``text`` in a single
    free-form text area.
    """

    mode: ViewMode
    text: str
    spans: List[DisplaySpan] = Field(default_factory=list)
    inputs: List[PlaceholderInput] = Field(default_factory=list)


class SessionView(BaseModel):
    """Subject and body views for one editing session."""

    session_id: str
    mode: ViewMode
    is_editing: bool
    has_changes: bool = Field(default=False, description="Edit mode: working text differs from the snapshot taken on entry")
    subject: DocumentView
    body: DocumentView
