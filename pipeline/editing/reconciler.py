"""
Placeholder Reconciler

Keeps one document (subject or body) as tokenized segments, renders it for
either view mode and folds single-placeholder edits back into the
canonical string.
"""

from typing import List, Optional, Tuple

from pipeline.core.exceptions import PlaceholderEditError
from pipeline.models.segments import Literal, Placeholder, Segment
from pipeline.steps.placeholder_tokenizer.utils import tokenize

from .models import DisplaySpan, DocumentView, PlaceholderInput, ViewMode

# Input width pads the placeholder name by this many characters
INPUT_WIDTH_PADDING = 2


class PlaceholderReconciler:
    """
    Stateful adapter between a canonical string and its segments.

    Placeholder edits replace one cached piece and re-join; the document is
    never re-tokenized for them. A whole-document replacement drops the
    segments, and the next read tokenizes the new text from scratch.
    """

    def __init__(self, document: str = "", sender_name: str = ""):
        self.sender_name = sender_name
        self._document = document
        self._segments: Optional[List[Segment]] = None
        self._pieces: Optional[List[str]] = None
        self._canonical: Optional[str] = None

    def _ensure_tokenized(self) -> None:
        if self._segments is None:
            self._segments = tokenize(self._document, self.sender_name)
            self._pieces = [segment.canonical for segment in self._segments]
            self._canonical = None

    @property
    def segments(self) -> Tuple[Segment, ...]:
        self._ensure_tokenized()
        return tuple(self._segments)

    @property
    def canonical(self) -> str:
        self._ensure_tokenized()
        if self._canonical is None:
            self._canonical = "".join(self._pieces)
        return self._canonical

    def edit_placeholder(self, index: int, new_name: str) -> str:
        """
        Replace the name of the placeholder at ``index``.

        Returns:
            The updated canonical string

        Raises:
            PlaceholderEditError: if ``index`` does not address a placeholder
        """
        self._ensure_tokenized()

        if not 0 <= index < len(self._segments):
            raise PlaceholderEditError(f"Segment index {index} is out of range")
        if not isinstance(self._segments[index], Placeholder):
            raise PlaceholderEditError(f"Segment {index} is not a placeholder")

        placeholder = Placeholder(new_name)
        self._segments[index] = placeholder
        self._pieces[index] = placeholder.canonical
        self._canonical = None
        return self.canonical

    def replace_document(self, text: str) -> None:
        """Replace the whole document verbatim (free-text edit)."""
        self._document = text
        self._segments = None
        self._pieces = None
        self._canonical = None

    def render(self, mode: ViewMode) -> DocumentView:
        """Render the document for the given view mode."""
        segments = self.segments

        if mode is ViewMode.DISPLAY:
            spans = [
                DisplaySpan(
                    index=index,
                    kind=segment.kind,
                    text=segment.text if isinstance(segment, Literal) else segment.name,
                )
                for index, segment in enumerate(segments)
            ]
            return DocumentView(mode=mode, text=self.canonical, spans=spans)

        inputs = [
            PlaceholderInput(
                index=index,
                value=segment.name,
                width=len(segment.name) + INPUT_WIDTH_PADDING,
            )
            for index, segment in enumerate(segments)
            if isinstance(segment, Placeholder)
        ]
        return DocumentView(mode=mode, text=self.canonical, inputs=inputs)
