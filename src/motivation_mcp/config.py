"""Configuration management for the Motivation Playlist MCP Server.

All configuration is read from environment variables and validated once, when
the server is constructed. A missing required variable is fatal at startup.
"""
import os
from dataclasses import dataclass

from .exceptions import ConfigurationError

DEFAULT_ASANA_API_URL = "https://app.asana.com/api/1.0"
DEFAULT_SPOTIFY_REDIRECT_URI = "http://127.0.0.1:8888/callback"
DEFAULT_HTTP_TIMEOUT = 30.0


@dataclass(frozen=True)
class MotivationConfig:
    """Configuration for the motivation playlist server (reads from environment)."""

    # Required: Asana
    asana_access_token: str
    asana_project_id: str

    # Required: Spotify
    spotify_client_id: str
    spotify_client_secret: str
    spotify_refresh_token: str

    # Optional
    asana_api_url: str = DEFAULT_ASANA_API_URL
    spotify_redirect_uri: str = DEFAULT_SPOTIFY_REDIRECT_URI
    http_timeout: float = DEFAULT_HTTP_TIMEOUT

    @classmethod
    def from_environment(cls) -> "MotivationConfig":
        """Load configuration from environment variables.

        Returns:
            MotivationConfig: Loaded configuration object

        Raises:
            ConfigurationError: If required variables are missing or optional
                values cannot be parsed
        """
        required = {
            "ASANA_ACCESS_TOKEN": os.getenv("ASANA_ACCESS_TOKEN"),
            "ASANA_PROJECT_ID": os.getenv("ASANA_PROJECT_ID"),
            "SPOTIFY_CLIENT_ID": os.getenv("SPOTIFY_CLIENT_ID"),
            "SPOTIFY_CLIENT_SECRET": os.getenv("SPOTIFY_CLIENT_SECRET"),
            "SPOTIFY_REFRESH_TOKEN": os.getenv("SPOTIFY_REFRESH_TOKEN"),
        }

        missing = [var for var, value in required.items() if not value]
        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}"
            )

        raw_timeout = os.getenv("MOTIVATION_HTTP_TIMEOUT", str(DEFAULT_HTTP_TIMEOUT))
        try:
            http_timeout = float(raw_timeout)
        except ValueError:
            raise ConfigurationError(
                f"Invalid MOTIVATION_HTTP_TIMEOUT: {raw_timeout!r}. Must be a number of seconds"
            ) from None
        if http_timeout <= 0:
            raise ConfigurationError(
                f"Invalid MOTIVATION_HTTP_TIMEOUT: {raw_timeout!r}. Must be > 0"
            )

        return cls(
            asana_access_token=required["ASANA_ACCESS_TOKEN"],
            asana_project_id=required["ASANA_PROJECT_ID"],
            spotify_client_id=required["SPOTIFY_CLIENT_ID"],
            spotify_client_secret=required["SPOTIFY_CLIENT_SECRET"],
            spotify_refresh_token=required["SPOTIFY_REFRESH_TOKEN"],
            asana_api_url=os.getenv("ASANA_API_URL", DEFAULT_ASANA_API_URL).rstrip("/"),
            spotify_redirect_uri=os.getenv("SPOTIFY_REDIRECT_URI", DEFAULT_SPOTIFY_REDIRECT_URI),
            http_timeout=http_timeout,
        )
