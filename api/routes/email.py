"""
Email generation and editing API endpoints.

This module serves the form layer: it runs generation cycles, exposes the
Display/Edit view of an editing session and accepts placeholder and
free-text edits.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse
import logfire

from api.dependencies import get_orchestrator, get_sessions
from pipeline.core.exceptions import EditModeError, PlaceholderEditError
from pipeline.core.orchestrator import GenerationOrchestrator
from pipeline.editing.models import DocumentField, SessionView
from pipeline.editing.session import EditingSession
from pipeline.models.fields import (
    COMMON_REASONS,
    LEAVE_REASONS,
    Honorific,
    Relationship,
    Tone,
)
from pipeline.models.segments import Literal
from pipeline.steps.placeholder_tokenizer.utils import extract_placeholders, tokenize
from schemas.email import (
    FormOptionsResponse,
    GenerateEmailRequest,
    PlaceholderEditRequest,
    SegmentResponse,
    TextReplaceRequest,
    TokenizeRequest,
    TokenizeResponse,
)
from services.sessions import SessionNotFoundError, SessionStore


router = APIRouter(prefix="/api/email", tags=["Email Generation"])


def _load_session(session_id: str, sessions: SessionStore) -> EditingSession:
    try:
        return sessions.get(session_id)
    except SessionNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Session not found or expired"
        )


@router.get("/options", response_model=FormOptionsResponse)
async def get_form_options():
    """Choices for the form's enumerated fields."""
    return FormOptionsResponse(
        reasons=COMMON_REASONS,
        tones=[tone.value for tone in Tone],
        honorifics=[honorific.value for honorific in Honorific],
        relationships=[relationship.value for relationship in Relationship],
        leave_reasons=LEAVE_REASONS,
    )


@router.post("/generate", response_model=SessionView)
async def generate_email(
    request: GenerateEmailRequest,
    orchestrator: GenerationOrchestrator = Depends(get_orchestrator),
    sessions: SessionStore = Depends(get_sessions),
):
    """
    Run one generation cycle and return the session view.

    Generation failures are not HTTP errors: the session then holds an
    empty subject and the fixed error message as its body.

    Args:
        request: Email fields and optional session ID
        orchestrator: Generation orchestrator (injected by dependency)
        sessions: Session store (injected by dependency)

    Returns:
        SessionView: Display-mode view of the new document
    """
    session = sessions.get_or_create(
        session_id=request.session_id,
        sender_name=request.fields.sender.name
    )

    with logfire.span(
        "api.generate_email",
        session_id=session.session_id,
        reason=request.fields.intent.reason
    ):
        await orchestrator.generate(request.fields, session=session)
        return session.view()


@router.get("/sessions/{session_id}", response_model=SessionView)
async def get_session(
    session_id: str,
    sessions: SessionStore = Depends(get_sessions),
):
    """Current view of an editing session."""
    return _load_session(session_id, sessions).view()


@router.post("/sessions/{session_id}/toggle", response_model=SessionView)
async def toggle_editing(
    session_id: str,
    sessions: SessionStore = Depends(get_sessions),
):
    """
    Switch between Display and Edit.

    Leaving Edit commits the working subject and body.
    """
    session = _load_session(session_id, sessions)
    session.toggle()
    return session.view()


@router.put("/sessions/{session_id}/{field}/placeholders/{index}", response_model=SessionView)
async def edit_placeholder(
    session_id: str,
    field: DocumentField,
    index: int,
    request: PlaceholderEditRequest,
    sessions: SessionStore = Depends(get_sessions),
):
    """
    Replace one placeholder in the subject or body.

    Raises:
        HTTPException 404: Unknown or expired session
        HTTPException 409: Session is not in edit mode
        HTTPException 400: Index does not address a placeholder
    """
    session = _load_session(session_id, sessions)

    try:
        session.edit_placeholder(field, index, request.value)
    except EditModeError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except PlaceholderEditError as e:
        logfire.warning(
            "Rejected placeholder edit",
            session_id=session_id,
            field=field.value,
            index=index,
            error=str(e)
        )
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return session.view()


@router.put("/sessions/{session_id}/{field}", response_model=SessionView)
async def replace_text(
    session_id: str,
    field: DocumentField,
    request: TextReplaceRequest,
    sessions: SessionStore = Depends(get_sessions),
):
    """Replace the whole subject or body with free text."""
    session = _load_session(session_id, sessions)

    try:
        session.replace_text(field, request.text)
    except EditModeError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    return session.view()


@router.get("/sessions/{session_id}/export/{field}", response_class=PlainTextResponse)
async def export_text(
    session_id: str,
    field: DocumentField,
    sessions: SessionStore = Depends(get_sessions),
):
    """Committed subject or body as plain text, for copying to the clipboard."""
    session = _load_session(session_id, sessions)
    return PlainTextResponse(session.committed_text(field))


@router.post("/tokenize", response_model=TokenizeResponse)
async def tokenize_text(request: TokenizeRequest):
    """Tokenize arbitrary text into literal and placeholder segments."""
    segments = tokenize(request.text, request.sender_name)
    return TokenizeResponse(
        segments=[
            SegmentResponse(
                kind=segment.kind,
                text=segment.text if isinstance(segment, Literal) else segment.name
            )
            for segment in segments
        ],
        placeholders=extract_placeholders(request.text),
    )
