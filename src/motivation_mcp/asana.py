"""Async HTTP client for the Asana tasks API."""

import logging
from typing import Optional

import httpx

from .config import MotivationConfig
from .exceptions import UpstreamError
from .models import Task

logger = logging.getLogger(__name__)


class AsanaClient:
    """Fetches overdue tasks for a single Asana project.

    Attributes:
        project_id: Asana project GID tasks are read from
        client: httpx.AsyncClient for HTTP requests

    Example:
        >>> async with AsanaClient.from_config(config) as asana:
        ...     tasks = await asana.fetch_overdue_tasks(limit=5)
    """

    def __init__(
        self,
        access_token: str,
        project_id: str,
        base_url: str = "https://app.asana.com/api/1.0",
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize Asana client.

        Args:
            access_token: Asana personal access token
            project_id: Asana project GID
            base_url: Asana API base URL
            timeout: Request timeout in seconds
            client: Optional preconfigured httpx.AsyncClient (used in tests)
        """
        self.project_id = project_id
        self._base_url = base_url.rstrip("/")
        self.client = client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))
        self.client.headers.update(
            {
                "accept": "application/json",
                "authorization": f"Bearer {access_token}",
            }
        )

        logger.info(f"Initialized Asana client for project {project_id}")

    @classmethod
    def from_config(cls, config: MotivationConfig) -> "AsanaClient":
        return cls(
            access_token=config.asana_access_token,
            project_id=config.asana_project_id,
            base_url=config.asana_api_url,
            timeout=config.http_timeout,
        )

    async def fetch_overdue_tasks(self, limit: int) -> list[Task]:
        """Fetch up to ``limit`` tasks from the configured project.

        Args:
            limit: Maximum number of tasks to return (positive integer)

        Returns:
            List of Task snapshots in the order Asana returned them

        Raises:
            ValueError: If limit is not a positive integer
            UpstreamError: If Asana answers with a non-success status
            httpx.HTTPError: For network failures
        """
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise ValueError("Limit must be a positive integer.")

        url = f"{self._base_url}/tasks"
        params = {"project": self.project_id, "limit": limit}

        logger.debug(f"Fetching up to {limit} tasks from Asana project {self.project_id}")
        try:
            response = await self.client.get(url, params=params)
            if not response.is_success:
                raise UpstreamError("asana", response.status_code, _error_message(response))
            data = response.json()
        except Exception as e:
            logger.error(f"Failed to fetch Asana tasks: {e}")
            raise

        tasks = [Task.from_dict(item) for item in data.get("data") or []]
        logger.info(f"Fetched {len(tasks)} tasks from Asana")
        return tasks

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "AsanaClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


def _error_message(response: httpx.Response) -> str:
    """Extract the first Asana error message, falling back to the reason phrase."""
    try:
        body = response.json()
    except ValueError:
        body = None
    errors = (body.get("errors") if isinstance(body, dict) else None) or []
    if errors and isinstance(errors[0], dict) and errors[0].get("message"):
        return errors[0]["message"]
    return response.reason_phrase or "Request failed"
