"""Pytest configuration for integration tests."""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv


@pytest.fixture(autouse=True, scope="session")
def load_env() -> None:
    """Load environment variables from .env file before running integration tests.

    This fixture is automatically used for all tests in this directory and its subdirectories.
    It loads environment variables from:
    1. .env.integration (if it exists)
    2. .env (if it exists)

    The .env.integration file takes precedence over .env. Integration tests
    call the real GitHub API, so they are skipped when no token is available.
    """
    # Get the project root directory (3 levels up from this file)
    project_root = Path(__file__).parent.parent.parent

    # Try to load .env.integration first
    integration_env = project_root / ".env.integration"
    if integration_env.exists():
        load_dotenv(dotenv_path=integration_env)

    # Then try to load .env as fallback
    default_env = project_root / ".env"
    if default_env.exists():
        load_dotenv(dotenv_path=default_env)

    if not os.getenv("GITHUB_TOKEN"):
        pytest.skip("GITHUB_TOKEN is not set; skipping integration tests against the GitHub API")
