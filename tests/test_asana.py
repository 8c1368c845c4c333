"""Tests for AsanaClient using httpx.MockTransport."""

import httpx
import pytest

from motivation_mcp.asana import AsanaClient
from motivation_mcp.exceptions import UpstreamError
from motivation_mcp.models import Task

ASANA_TASKS = [
    {"gid": "1", "name": "Write report", "resource_type": "task", "resource_subtype": "default_task"},
    {"gid": "2", "name": "Review PR", "resource_type": "task", "resource_subtype": "default_task"},
]


def make_client(handler, **kwargs) -> AsanaClient:
    return AsanaClient(
        access_token="asana-token",
        project_id="proj-42",
        client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        **kwargs,
    )


@pytest.mark.asyncio
async def test_fetch_sends_project_limit_and_bearer_token():
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"data": ASANA_TASKS})

    async with make_client(handler) as asana:
        tasks = await asana.fetch_overdue_tasks(limit=5)

    assert len(requests) == 1
    request = requests[0]
    assert request.method == "GET"
    assert request.url.host == "app.asana.com"
    assert request.url.path == "/api/1.0/tasks"
    assert request.url.params["project"] == "proj-42"
    assert request.url.params["limit"] == "5"
    assert request.headers["authorization"] == "Bearer asana-token"
    assert request.headers["accept"] == "application/json"

    assert tasks == [Task.from_dict(item) for item in ASANA_TASKS]


@pytest.mark.asyncio
async def test_fetch_uses_configured_base_url():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200, json={"data": []})

    async with make_client(handler, base_url="https://asana.example.com/api/1.0/") as asana:
        await asana.fetch_overdue_tasks(limit=1)

    assert seen[0].startswith("https://asana.example.com/api/1.0/tasks?")


@pytest.mark.asyncio
async def test_fetch_returns_empty_list_when_no_tasks():
    async with make_client(lambda request: httpx.Response(200, json={"data": []})) as asana:
        assert await asana.fetch_overdue_tasks(limit=10) == []


@pytest.mark.asyncio
async def test_fetch_raises_upstream_error_with_status():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"errors": [{"message": "Not Authorized"}]})

    async with make_client(handler) as asana:
        with pytest.raises(UpstreamError) as exc_info:
            await asana.fetch_overdue_tasks(limit=5)

    assert exc_info.value.service == "asana"
    assert exc_info.value.status_code == 401
    assert exc_info.value.message == "Not Authorized"
    assert "401" in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_error_without_json_body_uses_reason_phrase():
    async with make_client(lambda request: httpx.Response(503, text="down")) as asana:
        with pytest.raises(UpstreamError) as exc_info:
            await asana.fetch_overdue_tasks(limit=5)

    assert exc_info.value.status_code == 503
    assert exc_info.value.message == "Service Unavailable"


@pytest.mark.asyncio
async def test_transport_errors_propagate_unchanged(caplog):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    async with make_client(handler) as asana:
        with pytest.raises(httpx.ConnectError):
            await asana.fetch_overdue_tasks(limit=5)

    assert "Failed to fetch Asana tasks" in caplog.text


@pytest.mark.asyncio
@pytest.mark.parametrize("limit", [0, -1, True, 2.5])
async def test_limit_must_be_positive_integer(limit):
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    async with make_client(handler) as asana:
        with pytest.raises(ValueError, match="positive integer"):
            await asana.fetch_overdue_tasks(limit)


def test_from_config(config):
    asana = AsanaClient.from_config(config)

    assert asana.project_id == config.asana_project_id
    assert asana.client.headers["authorization"] == f"Bearer {config.asana_access_token}"
