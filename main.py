"""
Main FastAPI application entry point.
"""

from contextlib import asynccontextmanager
from typing import Dict

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logfire

from config import settings
from observability.logfire_config import LogfireConfig
from api.routes import email_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    # Initialize Logfire first so we can use structured logging
    LogfireConfig.initialize(token=settings.logfire_token, environment=settings.environment)

    logfire.info(
        "Starting Mailsmith API Server",
        environment=settings.environment,
        debug=settings.debug,
        generation_model=settings.generation_model,
    )

    if not (settings.google_api_key or settings.anthropic_api_key):
        logfire.warning(
            "No generation provider key configured",
            hint="Set GOOGLE_API_KEY or ANTHROPIC_API_KEY in .env; generation cycles will fail",
        )

    yield

    logfire.info("Shutting down Mailsmith API Server")


# Initialize FastAPI app
app = FastAPI(
    title="Mailsmith API",
    description="Generates emails from structured intent and serves placeholder-aware editing",
    version="1.0.0",
    lifespan=lifespan,
    debug=settings.debug,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Health Check Endpoints
# ============================================================================

@app.get("/health", tags=["Health"])
async def health_check() -> Dict[str, str]:
    """
    Health check endpoint for load balancers and monitoring.

    Returns:
        dict: Health status of the application
    """
    return {
        "status": "healthy",
        "service": "mailsmith-api",
        "version": "1.0.0",
        "environment": settings.environment,
    }


@app.get("/", tags=["Root"])
async def root() -> Dict[str, str]:
    """
    Root endpoint - API information.

    Returns:
        dict: Basic API information
    """
    return {
        "name": "Mailsmith API",
        "version": "1.0.0",
        "description": "Email generation with editable placeholders",
        "docs": "/docs",
        "health": "/health",
    }


# ============================================================================
# API Routers
# ============================================================================

# Generation cycles and editing sessions
app.include_router(email_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )
