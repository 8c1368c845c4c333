"""Playlist generation workflow.

Turns validated tool arguments into a Spotify playlist themed on the user's
overdue Asana tasks. Arguments are validated by the caller; a run refreshes the
Spotify token, fetches tasks, stops early when none are overdue, and otherwise
recommends tracks, creates and fills a playlist, then records it.

Failures propagate to the caller; nothing is rolled back, so a playlist whose
population fails stays created but empty.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .asana import AsanaClient
from .models import GeneratePlaylistArgs, PlaylistHandle, Task
from .spotify import SEED_GENRES, SpotifyClient
from .state import PlaylistState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of one workflow run.

    Attributes:
        tasks: Overdue tasks the playlist is themed on
        playlist: Created playlist, or None when there were no tasks
    """

    tasks: tuple[Task, ...]
    playlist: Optional[PlaylistHandle] = None


def playlist_name(tasks: tuple[Task, ...]) -> str:
    return f"Motivation Mix: {len(tasks)} Tasks to Crush!"


def playlist_description(tasks: tuple[Task, ...]) -> str:
    return f"Generated playlist for tasks: {', '.join(task.name for task in tasks)}"


class PlaylistWorkflow:
    """Orchestrates the Asana and Spotify clients for one playlist generation."""

    def __init__(self, asana: AsanaClient, spotify: SpotifyClient, state: PlaylistState):
        self.asana = asana
        self.spotify = spotify
        self.state = state

    async def generate(self, args: GeneratePlaylistArgs) -> GenerationResult:
        """Run the workflow for already validated arguments.

        Args:
            args: Validated tool arguments

        Returns:
            GenerationResult; its playlist is None when no tasks are overdue

        Raises:
            AuthError: If the Spotify credential cannot be refreshed
            UpstreamError: If Asana or Spotify answers with a failure status
            httpx.HTTPError: For Asana network failures
        """
        logger.debug("Refreshing Spotify access token")
        await self.spotify.refresh_access_token()

        logger.debug(f"Fetching up to {args.task_count} overdue tasks")
        tasks = tuple(await self.asana.fetch_overdue_tasks(args.task_count))

        if not tasks:
            logger.info("No overdue tasks found, skipping playlist creation")
            return GenerationResult(tasks=tasks)

        logger.debug(f"Requesting {args.playlist_length} recommendations at energy {args.energy_level}")
        tracks = await self.spotify.get_recommendations(
            target_energy=args.energy_level,
            seed_genres=SEED_GENRES,
            limit=args.playlist_length,
        )

        logger.debug(f"Creating playlist for {len(tasks)} tasks")
        playlist = await self.spotify.create_playlist(
            playlist_name(tasks),
            description=playlist_description(tasks),
            public=False,
        )

        logger.debug(f"Adding {len(tracks)} tracks to playlist {playlist.id}")
        await self.spotify.add_tracks_to_playlist(playlist.id, [track.uri for track in tracks])

        await self.state.record(playlist.external_url, len(tasks))
        logger.info(f"Generated playlist {playlist.external_url} for {len(tasks)} tasks")

        return GenerationResult(tasks=tasks, playlist=playlist)
