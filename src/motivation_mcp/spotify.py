"""Spotify Web API client wrapper with a refreshable access token."""

import asyncio
import logging
from typing import Any, Optional, Sequence

import requests
import spotipy
from spotipy.cache_handler import MemoryCacheHandler
from spotipy.oauth2 import SpotifyOAuth, SpotifyOauthError

from .config import MotivationConfig
from .exceptions import AuthError, UpstreamError
from .models import PlaylistHandle, Track

logger = logging.getLogger(__name__)

SEED_GENRES = ("work-out", "pop", "motivation", "electronic")
SCOPES = "playlist-modify-private playlist-modify-public"


class SpotifyClient:
    """Stateful Spotify client holding an in-memory access token.

    The token is refreshed explicitly with refresh_access_token() and never
    written to disk. spotipy is synchronous, so every call runs in a worker
    thread via asyncio.to_thread. Upstream failures are not retried.

    Example:
        >>> spotify = SpotifyClient(client_id, client_secret, refresh_token)
        >>> await spotify.refresh_access_token()
        >>> tracks = await spotify.get_recommendations(0.7, SEED_GENRES, 10)
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        refresh_token: str,
        redirect_uri: str = "http://127.0.0.1:8888/callback",
        timeout: float = 30.0,
    ):
        """Initialize Spotify client.

        Args:
            client_id: Spotify application client ID
            client_secret: Spotify application client secret
            refresh_token: Long-lived refresh token for the playlist owner
            redirect_uri: Redirect URI registered for the application
            timeout: Request timeout in seconds
        """
        self.refresh_token = refresh_token
        self._timeout = timeout
        self._spotify: Optional[spotipy.Spotify] = None

        self.auth_manager = SpotifyOAuth(
            client_id=client_id,
            client_secret=client_secret,
            redirect_uri=redirect_uri,
            scope=SCOPES,
            cache_handler=MemoryCacheHandler(),
            open_browser=False,
            requests_timeout=timeout,
        )

    @classmethod
    def from_config(cls, config: MotivationConfig) -> "SpotifyClient":
        return cls(
            client_id=config.spotify_client_id,
            client_secret=config.spotify_client_secret,
            refresh_token=config.spotify_refresh_token,
            redirect_uri=config.spotify_redirect_uri,
            timeout=config.http_timeout,
        )

    async def refresh_access_token(self) -> None:
        """Exchange the refresh token for a new access token.

        Raises:
            AuthError: If the token exchange fails
        """
        try:
            token_info = await asyncio.to_thread(
                self.auth_manager.refresh_access_token, self.refresh_token
            )
            access_token = token_info["access_token"]
        except (SpotifyOauthError, spotipy.SpotifyException, requests.RequestException, KeyError) as e:
            logger.error(f"Failed to refresh Spotify token: {e}")
            raise AuthError("Failed to authenticate with Spotify") from e

        # Spotify may rotate the refresh token
        if token_info.get("refresh_token"):
            self.refresh_token = token_info["refresh_token"]

        self._spotify = spotipy.Spotify(
            auth=access_token,
            requests_timeout=self._timeout,
            retries=0,
            status_retries=0,
        )
        logger.info("Refreshed Spotify access token")

    async def _call(self, method_name: str, *args, **kwargs) -> Any:
        """Run a spotipy method in a worker thread, translating API failures."""
        if self._spotify is None:
            raise AuthError("Spotify access token has not been refreshed")

        method = getattr(self._spotify, method_name)
        try:
            return await asyncio.to_thread(method, *args, **kwargs)
        except spotipy.SpotifyException as e:
            logger.error(f"Spotify {method_name} failed with HTTP {e.http_status}: {e.msg}")
            raise UpstreamError("spotify", e.http_status, e.msg) from e

    async def get_recommendations(
        self,
        target_energy: float,
        seed_genres: Sequence[str] = SEED_GENRES,
        limit: int = 10,
    ) -> list[Track]:
        """Get recommended tracks steered toward a target energy.

        Args:
            target_energy: Target energy audio feature (0.0-1.0)
            seed_genres: Seed genres (Spotify allows at most 5 seeds)
            limit: Number of tracks to request

        Returns:
            Recommended tracks in the order Spotify returned them
        """
        result = await self._call(
            "recommendations",
            seed_genres=list(seed_genres),
            limit=limit,
            target_energy=target_energy,
        )
        tracks = [Track.from_dict(item) for item in result.get("tracks") or []]
        logger.info(f"Received {len(tracks)} recommendations (target_energy={target_energy})")
        return tracks

    async def create_playlist(
        self, name: str, description: str = "", public: bool = False
    ) -> PlaylistHandle:
        """Create an empty playlist owned by the current user.

        Returns:
            PlaylistHandle with the playlist ID and external URL
        """
        user = await self._call("current_user")
        data = await self._call(
            "user_playlist_create",
            user["id"],
            name,
            public=public,
            description=description,
        )
        playlist = PlaylistHandle.from_dict(data)
        logger.info(f"Created playlist '{name}' ({playlist.id})")
        return playlist

    async def add_tracks_to_playlist(self, playlist_id: str, uris: Sequence[str]) -> None:
        """Append tracks to a playlist, preserving order."""
        if not uris:
            logger.warning(f"No tracks to add to playlist {playlist_id}")
            return

        await self._call("playlist_add_items", playlist_id, list(uris))
        logger.info(f"Added {len(uris)} tracks to playlist {playlist_id}")
