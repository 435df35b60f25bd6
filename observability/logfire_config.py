"""
Logfire configuration and initialization.

Logfire provides structured logging and tracing for the generation pipeline,
the editing sessions and the HTTP API.

Environment Variables:
    LOGFIRE_TOKEN: Logfire project token (optional; logs stay local without it)
    ENVIRONMENT: deployment environment (development, staging, production)
"""
import os
from typing import Optional

import logfire


class LogfireConfig:
    """
    Logfire configuration singleton.

    Ensures Logfire is initialized only once. Without a token, spans and logs
    are still produced locally but nothing is sent to the Logfire backend.
    """

    _initialized = False

    @classmethod
    def initialize(cls, token: Optional[str] = None, environment: Optional[str] = None) -> None:
        """
        Initialize Logfire and instrument pydantic-ai.

        Args:
            token: Logfire project token (or set LOGFIRE_TOKEN env var)
            environment: Deployment environment (or set ENVIRONMENT env var)
        """
        if cls._initialized:
            return

        token = token or os.getenv("LOGFIRE_TOKEN") or None

        logfire.configure(
            token=token,
            service_name="mailsmith",
            environment=environment or os.getenv("ENVIRONMENT", "development"),
            send_to_logfire="if-token-present",
        )

        # Generation requests/responses show up as spans under each cycle
        logfire.instrument_pydantic_ai()

        cls._initialized = True

    @classmethod
    def is_initialized(cls) -> bool:
        """
        Check if Logfire has been initialized.

        Returns:
            True if initialized, False otherwise
        """
        return cls._initialized
