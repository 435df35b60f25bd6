"""
Editing Session

Owns the Editable Document for one user while they review a generated
email: the committed subject/body and the Display/Edit mode.
"""

from typing import Optional

import logfire

from pipeline.core.exceptions import EditModeError
from pipeline.models.core import GeneratedDocument

from .models import DocumentField, SessionView, ViewMode
from .reconciler import PlaceholderReconciler


class EditingSession:
    """
    Two-state editing session.

    Entering Edit snapshots the committed document. Leaving Edit always
    commits whatever the free-text and placeholder edits produced; there is
    no discard and no undo history. Re-entering Edit starts from the latest
    committed document.
    """

    def __init__(self, session_id: str, sender_name: str = ""):
        self.session_id = session_id
        self.sender_name = sender_name
        self.mode = ViewMode.DISPLAY
        self.document = GeneratedDocument(subject="", body="")
        self.snapshot: Optional[GeneratedDocument] = None
        self._reconcilers = self._build_reconcilers(self.document)

    def _build_reconcilers(self, document: GeneratedDocument):
        return {
            DocumentField.SUBJECT: PlaceholderReconciler(document.subject, self.sender_name),
            DocumentField.BODY: PlaceholderReconciler(document.body, self.sender_name),
        }

    @property
    def is_editing(self) -> bool:
        return self.mode is ViewMode.EDIT

    def load(self, document: GeneratedDocument, sender_name: Optional[str] = None) -> None:
        """
        Replace the Editable Document wholesale with a new generation result.

        Any in-progress edit is dropped and the session returns to Display.
        """
        if sender_name is not None:
            self.sender_name = sender_name
        self._reconcilers = self._build_reconcilers(document)
        self.document = self._working_document()
        self.mode = ViewMode.DISPLAY
        self.snapshot = None

    def _working_document(self) -> GeneratedDocument:
        return GeneratedDocument(
            subject=self._reconcilers[DocumentField.SUBJECT].canonical,
            body=self._reconcilers[DocumentField.BODY].canonical,
        )

    def toggle(self) -> ViewMode:
        """Switch between Display and Edit, committing when leaving Edit."""
        if self.mode is ViewMode.DISPLAY:
            self.snapshot = self.document
            self.mode = ViewMode.EDIT
        else:
            self.document = self._working_document()
            self._reconcilers = self._build_reconcilers(self.document)
            self.snapshot = None
            self.mode = ViewMode.DISPLAY

        logfire.info(
            "Editing mode toggled",
            session_id=self.session_id,
            mode=self.mode.value
        )
        return self.mode

    def _require_edit_mode(self) -> None:
        if not self.is_editing:
            raise EditModeError("Edits are only accepted in edit mode")

    def edit_placeholder(self, field: DocumentField, index: int, value: str) -> str:
        """Edit one placeholder of the subject or body; returns the working text."""
        self._require_edit_mode()
        return self._reconcilers[field].edit_placeholder(index, value)

    def replace_text(self, field: DocumentField, text: str) -> str:
        """Replace the whole subject or body; returns the working text."""
        self._require_edit_mode()
        reconciler = self._reconcilers[field]
        reconciler.replace_document(text)
        return reconciler.canonical

    def committed_text(self, field: DocumentField) -> str:
        if field is DocumentField.SUBJECT:
            return self.document.subject
        return self.document.body

    @property
    def has_changes(self) -> bool:
        """True in Edit mode once the working text differs from the snapshot."""
        return self.snapshot is not None and self._working_document() != self.snapshot

    def view(self) -> SessionView:
        return SessionView(
            session_id=self.session_id,
            mode=self.mode,
            is_editing=self.is_editing,
            has_changes=self.has_changes,
            subject=self._reconcilers[DocumentField.SUBJECT].render(self.mode),
            body=self._reconcilers[DocumentField.BODY].render(self.mode),
        )
