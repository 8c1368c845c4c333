"""Data models for the Motivation Playlist MCP Server."""

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from .exceptions import ValidationError


@dataclass(frozen=True)
class Task:
    """Snapshot of an Asana task as returned by the tasks endpoint.

    Attributes:
        gid: Asana global identifier
        name: Display name
        resource_type: Asana resource type (normally "task")
        resource_subtype: Asana resource subtype (e.g. "default_task", "milestone")
    """

    gid: str
    name: str
    resource_type: str = ""
    resource_subtype: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Task":
        """Build a Task from an Asana API task object (no shape validation)."""
        return cls(
            gid=str(data.get("gid", "")),
            name=str(data.get("name", "")),
            resource_type=str(data.get("resource_type", "")),
            resource_subtype=str(data.get("resource_subtype", "")),
        )

    def to_dict(self) -> dict[str, str]:
        """Convert to the Asana wire shape."""
        return {
            "gid": self.gid,
            "name": self.name,
            "resource_type": self.resource_type,
            "resource_subtype": self.resource_subtype,
        }


@dataclass(frozen=True)
class Track:
    """Recommended Spotify track."""

    uri: str
    id: Optional[str] = None
    name: Optional[str] = None
    artists: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Track":
        return cls(
            uri=data["uri"],
            id=data.get("id"),
            name=data.get("name"),
            artists=tuple(artist.get("name", "") for artist in data.get("artists") or []),
        )


@dataclass(frozen=True)
class PlaylistHandle:
    """Newly created Spotify playlist.

    Attributes:
        id: Spotify playlist ID
        external_url: Public open.spotify.com URL
    """

    id: str
    external_url: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PlaylistHandle":
        return cls(id=data["id"], external_url=data["external_urls"]["spotify"])


def _to_number(value: Any) -> float:
    """Coerce a raw tool argument to a number; missing or non-numeric becomes 0."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        number = value
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return 0
    else:
        return 0
    return number if math.isfinite(number) else 0


@dataclass(frozen=True)
class GeneratePlaylistArgs:
    """Validated arguments for generate_motivation_playlist.

    Attributes:
        task_count: Number of overdue tasks to consider (1-20)
        playlist_length: Number of songs in the playlist (5-50)
        energy_level: Desired energy level (0.0-1.0)
    """

    task_count: int = 5
    playlist_length: int = 10
    energy_level: float = 0.7

    # (argument name, attribute, minimum, maximum, integer, description)
    FIELDS = (
        ("taskCount", "task_count", 1, 20, True, "Number of overdue tasks to consider"),
        ("playlistLength", "playlist_length", 5, 50, True, "Number of songs in the playlist"),
        ("energyLevel", "energy_level", 0.0, 1.0, False, "Desired energy level (0.0-1.0)"),
    )

    def __post_init__(self):
        """Validate ranges on initialization."""
        errors = []
        for arg_name, attr, minimum, maximum, integer, _ in self.FIELDS:
            value = getattr(self, attr)
            if integer and value != int(value):
                errors.append(f"{arg_name} must be a whole number (got {value})")
            elif not minimum <= value <= maximum:
                errors.append(f"{arg_name} must be between {minimum} and {maximum} (got {value})")
        if errors:
            raise ValidationError(errors)

    @classmethod
    def from_arguments(cls, arguments: Optional[dict[str, Any]]) -> "GeneratePlaylistArgs":
        """Coerce and validate raw MCP tool arguments.

        Missing or non-numeric values become 0 before range validation, so an
        omitted argument is rejected unless 0 is inside its range.

        Raises:
            ValidationError: If any value is outside its documented range
        """
        arguments = arguments or {}
        numbers = {attr: _to_number(arguments.get(arg_name)) for arg_name, attr, *_ in cls.FIELDS}
        args = cls(**numbers)
        return cls(
            task_count=int(args.task_count),
            playlist_length=int(args.playlist_length),
            energy_level=float(args.energy_level),
        )

    @classmethod
    def json_schema(cls) -> dict[str, Any]:
        """Build the JSON schema advertised in the tool descriptor."""
        properties = {}
        for arg_name, attr, minimum, maximum, integer, description in cls.FIELDS:
            properties[arg_name] = {
                "type": "integer" if integer else "number",
                "description": description,
                "minimum": minimum,
                "maximum": maximum,
                "default": cls.__dataclass_fields__[attr].default,
            }
        return {"type": "object", "properties": properties}


@dataclass(frozen=True)
class PlaylistRecord:
    """Most recently generated playlist."""

    playlist_url: str
    task_count: int
    generated_at: datetime = field(compare=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "playlistUrl": self.playlist_url,
            "taskCount": self.task_count,
            "generatedAt": self.generated_at.isoformat(),
        }
