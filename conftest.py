"""Root conftest.py for pytest configuration.

This file configures pytest for the entire project, ensuring:
- Proper Python path setup for imports
- Logfire observability configuration (local only unless a token is set)
- Shared fixtures across all tests
- Fake generation service for offline tests
"""

import sys
from pathlib import Path

import logfire
import pytest


# ============================================================================
# Python Path Configuration
# ============================================================================

def pytest_configure(config):
    """Configure pytest with custom settings and ensure project root is in sys.path."""

    # Add project root to sys.path to ensure top-level packages are importable
    project_root = Path(__file__).parent.resolve()
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))

    # Register custom markers
    config.addinivalue_line(
        "markers",
        "integration: marks tests that exercise the HTTP API end to end"
    )
    config.addinivalue_line(
        "markers",
        "unit: marks tests as unit tests (fast, no external dependencies)"
    )

    # Configure logfire for all tests; nothing leaves the machine without a token
    logfire.configure(
        service_name="mailsmith_tests",
        environment="test",
        send_to_logfire="if-token-present",
        console=False,
    )


# ============================================================================
# Shared Fixtures
# ============================================================================

@pytest.fixture(scope="session")
def project_root():
    """Return the absolute path to the project root directory."""
    return Path(__file__).parent.resolve()


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Fixture to mock environment variables for testing.

    Usage:
        def test_something(mock_env_vars):
            mock_env_vars({"GENERATION_MODEL": "test", "DEBUG": "true"})
    """
    def _set_env_vars(env_dict: dict):
        for key, value in env_dict.items():
            monkeypatch.setenv(key, value)

    return _set_env_vars


class FakeGenerationService:
    """Generation service double: returns a canned completion or raises."""

    def __init__(self, response: str = "", error: Exception | None = None):
        self.response = response
        self.error = error
        self.prompts: list[str] = []

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def fake_service_factory():
    """Build FakeGenerationService instances.

    Usage:
        service = fake_service_factory("Subject: Hi\\n\\nBody")
        service = fake_service_factory(error=ConnectionError("down"))
    """
    def _factory(response: str = "", error: Exception | None = None) -> FakeGenerationService:
        return FakeGenerationService(response=response, error=error)

    return _factory

