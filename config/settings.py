"""Application configuration using Pydantic Settings."""

import os
from typing import List
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# NOTE: logfire.configure() is not called here. Logfire is configured once at
# application startup (main.py via observability/logfire_config.py) or in the
# pytest hooks (conftest.py).


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every setting has a default so the engine can be imported (and tested)
    without a populated environment. Provider keys are only needed when the
    real generation service is called.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application Settings
    environment: str = Field(default="development", description="Environment: development, staging, production")
    debug: bool = Field(default=False, description="Debug mode")

    # Server Configuration
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, description="Server port")

    # CORS Settings
    allowed_origins: str = Field(
        default="http://localhost:3000",
        description="Comma-separated list of allowed CORS origins"
    )

    # Generation Service
    generation_model: str = Field(
        default="google-gla:gemini-2.0-flash",
        description="pydantic-ai model identifier used for email generation"
    )
    generation_temperature: float = Field(default=0.7, description="Sampling temperature")
    generation_max_tokens: int = Field(default=1500, description="Completion token limit")
    generation_retries: int = Field(default=1, description="Agent-level retries")

    # Provider keys
    google_api_key: str = Field(default="", description="Google AI (Gemini) API key")
    anthropic_api_key: str = Field(default="", description="Anthropic API key")

    # Editing sessions (in-memory only)
    session_ttl_seconds: int = Field(default=3600, description="Idle lifetime of an editing session")
    max_sessions: int = Field(default=1000, description="Maximum concurrent editing sessions")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Observability
    logfire_token: str = Field(default="", description="Logfire observability token")

    @field_validator("allowed_origins")
    @classmethod
    def parse_origins(cls, v: str) -> List[str]:
        """Parse comma-separated origins into a list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @field_validator("session_ttl_seconds", "max_sessions")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Session limits must be positive."""
        if v <= 0:
            raise ValueError("Session limits must be positive")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment.lower() == "production"


# Create a singleton instance
settings = Settings()

# Ensure provider SDKs that read their key from the environment see the configured value.
if settings.google_api_key:
    os.environ.setdefault("GOOGLE_API_KEY", settings.google_api_key)
    os.environ.setdefault("GEMINI_API_KEY", settings.google_api_key)
if settings.anthropic_api_key:
    os.environ.setdefault("ANTHROPIC_API_KEY", settings.anthropic_api_key)


def get_settings() -> "Settings":
    """Return the singleton settings instance."""
    return settings
