"""Exception classes for the Motivation Playlist MCP Server."""


class ConfigurationError(EnvironmentError):
    """Required configuration is missing or invalid.

    Raised once while loading configuration; the server must not start.
    """

    pass


class ValidationError(ValueError):
    """Tool arguments violate the documented ranges.

    Attributes:
        errors: One message per offending field
    """

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(", ".join(errors))


class MotivationError(Exception):
    """Base exception for upstream service failures."""

    pass


class AuthError(MotivationError):
    """Spotify credential refresh failed."""

    pass


class UpstreamError(MotivationError):
    """An upstream API answered with a failure status.

    Attributes:
        service: Name of the upstream service ("asana" or "spotify")
        status_code: HTTP status returned by the service
        message: Error message from the service
    """

    def __init__(self, service: str, status_code: int, message: str):
        """Initialize upstream error.

        Args:
            service: Upstream service name
            status_code: HTTP status code
            message: Human-readable error message
        """
        self.service = service
        self.status_code = status_code
        self.message = message
        super().__init__(f"{service} HTTP error {status_code}: {message}")
