"""Contains exceptions raised when reconciling application configuration."""

from github_user_search.exceptions import ApiError, ErrorCode


class RequiredConfigurationElementError(ApiError):
    """Raised when a required configuration element is missing."""

    def __init__(self, name: str, cli_name: str, env_name: str) -> None:
        """Initializes the exception with the name of the missing element."""
        super().__init__(
            f"Missing required configuration element: {name} (command line option {cli_name}, environment variable {env_name})",
            status_code=500,
            code=ErrorCode.MISSING_ENV_VAR,
        )
        self.name = name
        self.cli_name = cli_name
        self.env_name = env_name
