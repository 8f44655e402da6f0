"""Utility functions for integration tests."""

import subprocess
import sys

from github_user_search.configuration.driver import get_base_config
from github_user_search.configuration.models import BaseConfig
from github_user_search.search.service import SearchUsersService, create_search_service


def get_cli_with_starting_args() -> list[str]:
    """Get the command that runs the github-user-search CLI with the current interpreter."""
    return [sys.executable, "-m", "github_user_search.configuration.cli"]


def run_cli(args: list[str]) -> subprocess.CompletedProcess[str]:
    """Helper to run the CLI as a subprocess and capture output.

    Args:
        args: List of command line arguments to pass to the CLI.

    Returns:
        subprocess.CompletedProcess: The result of running the CLI command.
    """
    complete_command = get_cli_with_starting_args() + args
    print(f"Running command: {' '.join(complete_command)}")
    result = subprocess.run(
        complete_command,
        capture_output=True,
        text=True,
    )
    print(f"Command result: {result.returncode}")
    print(f"Command stdout: {result.stdout}")
    print(f"Command stderr: {result.stderr}")
    return result


def get_integration_config() -> BaseConfig:
    """Reconcile configuration from the environment loaded for integration tests."""
    return get_base_config()


def get_search_service() -> SearchUsersService:
    """Build a search service that talks to the real GitHub API."""
    return create_search_service(get_integration_config())
