"""
Completion Step

Calls the external generation service with the built request.
"""

from .main import CompletionStep

__all__ = ["CompletionStep"]
