"""In-memory record of the most recently generated playlist."""

import asyncio
from datetime import datetime, timezone
from typing import Optional

from .models import PlaylistRecord


class PlaylistState:
    """Last-result state owned by the server and shared by its registries.

    Only a successful playlist generation writes to it; nothing survives a
    process restart.
    """

    def __init__(self):
        self._latest: Optional[PlaylistRecord] = None
        self._lock = asyncio.Lock()

    @property
    def latest(self) -> Optional[PlaylistRecord]:
        return self._latest

    async def record(self, playlist_url: str, task_count: int) -> PlaylistRecord:
        """Replace the latest record with a newly generated playlist."""
        async with self._lock:
            self._latest = PlaylistRecord(
                playlist_url=playlist_url,
                task_count=task_count,
                generated_at=datetime.now(timezone.utc),
            )
            return self._latest
