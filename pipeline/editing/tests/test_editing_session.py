"""
Test suite for the Editing Session

Covers the Display/Edit toggle, snapshot/commit semantics and edit-mode
enforcement.

Run with:
    pytest pipeline/editing/tests/test_editing_session.py -v
"""

import pytest

from pipeline.core.exceptions import EditModeError
from pipeline.editing.models import DocumentField, ViewMode
from pipeline.editing.session import EditingSession
from pipeline.models.core import GeneratedDocument


@pytest.fixture
def session():
    session = EditingSession(session_id="session-1", sender_name="Alex")
    session.load(GeneratedDocument(
        subject="Update on [Project Name]",
        body="Hi [Name],\n\nThe demo is on [Specific Date].\n\nBest,\n[YOUR NAME]",
    ))
    return session


def placeholder_index(session: EditingSession, field: DocumentField, name: str) -> int:
    view = session.view()
    document = view.subject if field is DocumentField.SUBJECT else view.body
    for span in document.spans or []:
        if span.kind == "placeholder" and span.text == name:
            return span.index
    for field_input in document.inputs:
        if field_input.value == name:
            return field_input.index
    raise AssertionError(f"No placeholder named {name}")


# ===================================================================
# TESTS - Loading
# ===================================================================

def test_load_starts_in_display_with_resolved_name(session):
    assert session.mode is ViewMode.DISPLAY
    assert session.is_editing is False
    assert session.document.body.endswith("Best,\nAlex")


def test_load_replaces_document_and_leaves_edit_mode(session):
    session.toggle()
    session.replace_text(DocumentField.BODY, "draft in progress")

    session.load(GeneratedDocument(subject="New", body="Fresh body"))

    assert session.mode is ViewMode.DISPLAY
    assert session.snapshot is None
    assert session.document == GeneratedDocument(subject="New", body="Fresh body")


# ===================================================================
# TESTS - Toggle semantics
# ===================================================================

def test_toggle_without_changes_is_idempotent(session):
    before = session.document

    assert session.toggle() is ViewMode.EDIT
    assert session.snapshot == before
    assert session.toggle() is ViewMode.DISPLAY

    assert session.document == before


def test_leaving_edit_commits_placeholder_edits(session):
    session.toggle()
    index = placeholder_index(session, DocumentField.BODY, "Specific Date")
    session.edit_placeholder(DocumentField.BODY, index, "May 3")

    # Not committed until edit mode is left
    assert "[Specific Date]" in session.document.body

    session.toggle()

    assert "The demo is on [May 3]." in session.document.body
    assert session.snapshot is None


def test_leaving_edit_commits_free_text(session):
    session.toggle()
    session.replace_text(DocumentField.SUBJECT, "Rewritten subject")
    session.toggle()

    assert session.document.subject == "Rewritten subject"


def test_reentering_edit_starts_from_committed_text(session):
    session.toggle()
    index = placeholder_index(session, DocumentField.SUBJECT, "Project Name")
    session.edit_placeholder(DocumentField.SUBJECT, index, "Apollo")
    session.toggle()

    session.toggle()
    view = session.view()

    assert view.subject.text == "Update on [Apollo]"
    assert [field.value for field in view.subject.inputs] == ["Apollo"]
    assert session.snapshot.subject == "Update on [Apollo]"


def test_view_reports_changes_against_snapshot(session):
    assert session.view().has_changes is False

    session.toggle()
    assert session.view().has_changes is False

    index = placeholder_index(session, DocumentField.SUBJECT, "Project Name")
    session.edit_placeholder(DocumentField.SUBJECT, index, "Apollo")
    assert session.view().has_changes is True

    session.edit_placeholder(DocumentField.SUBJECT, index, "Project Name")
    assert session.view().has_changes is False

    session.replace_text(DocumentField.BODY, "Rewritten")
    assert session.view().has_changes is True

    session.toggle()
    assert session.view().has_changes is False


def test_free_text_then_placeholder_edit(session):
    session.toggle()
    session.replace_text(DocumentField.BODY, "Hello [Team], see [Doc].")
    index = placeholder_index(session, DocumentField.BODY, "Doc")
    session.edit_placeholder(DocumentField.BODY, index, "the agenda")
    session.toggle()

    assert session.document.body == "Hello [Team], see [the agenda]."


# ===================================================================
# TESTS - Edit-mode enforcement
# ===================================================================

def test_placeholder_edit_requires_edit_mode(session):
    with pytest.raises(EditModeError):
        session.edit_placeholder(DocumentField.SUBJECT, 1, "x")


def test_free_text_requires_edit_mode(session):
    with pytest.raises(EditModeError):
        session.replace_text(DocumentField.BODY, "x")


# ===================================================================
# TESTS - Views
# ===================================================================

def test_display_view_marks_placeholders(session):
    view = session.view()

    assert view.session_id == "session-1"
    assert view.is_editing is False
    assert [span.text for span in view.body.spans if span.kind == "placeholder"] == [
        "Name",
        "Specific Date",
    ]


def test_edit_view_has_inputs(session):
    session.toggle()
    view = session.view()

    assert view.is_editing is True
    assert view.mode is ViewMode.EDIT
    assert [field.value for field in view.body.inputs] == ["Name", "Specific Date"]
    assert view.body.text == session.document.body


def test_committed_text_is_exported(session):
    assert session.committed_text(DocumentField.SUBJECT) == "Update on [Project Name]"
    assert session.committed_text(DocumentField.BODY) == session.document.body


def test_new_session_is_empty():
    session = EditingSession(session_id="empty")

    view = session.view()

    assert view.subject.text == ""
    assert view.body.text == ""
