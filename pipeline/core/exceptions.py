"""
Custom exceptions for pipeline execution and editing sessions.

Pipeline exceptions never leave the generation orchestrator: it converts
them into the sentinel document. Editing exceptions signal caller misuse
and are mapped to HTTP errors by the API layer.
"""


class PipelineExecutionError(Exception):
    """
    Base exception for pipeline execution failures.

    All step-specific exceptions inherit from this.
    """
    pass


class StepExecutionError(PipelineExecutionError):
    """
    Raised when a pipeline step fails.

    Attributes:
        step_name: Name of the failed step
        original_error: The underlying exception
    """

    def __init__(self, step_name: str, original_error: Exception):
        self.step_name = step_name
        self.original_error = original_error
        error_message = f"Step '{step_name}' failed: {str(original_error)}"
        super().__init__(error_message)


class ExternalAPIError(PipelineExecutionError):
    """
    Raised when the generation service fails (transport, provider or quota
    errors) or returns an empty completion.
    """
    pass


class EditingError(Exception):
    """Base exception for invalid edits on an editing session."""
    pass


class PlaceholderEditError(EditingError, ValueError):
    """Raised when a placeholder edit addresses a segment that is not a placeholder."""
    pass


class EditModeError(EditingError):
    """Raised when an edit is attempted while the session is in Display mode."""
    pass
