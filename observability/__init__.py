"""
Observability package.

Structured logging and tracing for generation cycles via Logfire.
"""
from observability.logfire_config import LogfireConfig

__all__ = ["LogfireConfig"]
