"""
Editing package

Placeholder reconciliation and the Display/Edit session for a generated email.
"""

from .models import DocumentField, DocumentView, SessionView, ViewMode
from .reconciler import PlaceholderReconciler
from .session import EditingSession

__all__ = [
    "DocumentField",
    "DocumentView",
    "SessionView",
    "ViewMode",
    "PlaceholderReconciler",
    "EditingSession",
]
