"""
Services module for external collaborators and session state.
"""

from services.generation import (
    GenerationService,
    PydanticAIGenerationService,
    get_generation_service,
)
from services.sessions import SessionStore, SessionNotFoundError, get_session_store

__all__ = [
    "GenerationService",
    "PydanticAIGenerationService",
    "get_generation_service",
    "SessionStore",
    "SessionNotFoundError",
    "get_session_store",
]
