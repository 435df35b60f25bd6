"""Dependencies shared by the API routes."""

from fastapi import Depends

from pipeline.core.orchestrator import GenerationOrchestrator
from services.generation import GenerationService, get_generation_service
from services.sessions import SessionStore, get_session_store


def get_sessions() -> SessionStore:
    """Session store dependency (overridable in tests)."""
    return get_session_store()


def get_service() -> GenerationService:
    """Generation service dependency (overridable in tests)."""
    return get_generation_service()


def get_orchestrator(
    service: GenerationService = Depends(get_service),
) -> GenerationOrchestrator:
    return GenerationOrchestrator(service)
