import pytest
from httpx import ASGITransport, AsyncClient

from v0mcp.core.config import SERVER_NAME, SERVER_VERSION
from v0mcp.llm.main import app


def _client() -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.mark.asyncio
async def test_index_and_health():
    async with _client() as client:
        index = await client.get("/")
        health = await client.get("/health/")

    assert index.json() == {"service": SERVER_NAME, "status": "ok"}
    assert health.status_code == 200
    assert health.json()["status"] == "healthy"
    assert health.json()["version"] == SERVER_VERSION


@pytest.mark.asyncio
async def test_capabilities_list_tools_prompts_and_resources():
    async with _client() as client:
        response = await client.get("/mcp")

    assert response.status_code == 200
    payload = response.json()
    assert payload["name"] == SERVER_NAME
    assert payload["status"] == "ready"
    assert len(payload["tools"]) == 7
    assert {resource["uri"] for resource in payload["resources"]} == {
        "v0://docs",
        "v0://performance",
    }
    assert len(payload["prompts"]) == 7


@pytest.mark.asyncio
async def test_invoke_tool_returns_envelope(use_runtime, provider):
    provider.fragments = ["<main>", "</main>"]

    async with _client() as client:
        response = await client.post(
            "/mcp",
            json={
                "name": "tailwind_layout_generator",
                "arguments": {"layoutName": "Shell"},
                "session_id": "http-session",
            },
        )

    assert response.status_code == 200
    payload = response.json()
    assert payload["isError"] is False
    assert payload["content"] == [{"type": "text", "text": "<main></main>"}]
    assert payload["metadata"]["chunkCount"] == 2
    assert payload["metadata"]["session_id"] == "http-session"


@pytest.mark.asyncio
async def test_invoke_tool_validation_failure_is_an_envelope(use_runtime, provider):
    async with _client() as client:
        response = await client.post(
            "/mcp",
            json={"name": "css_theme_generator", "arguments": {"theme_name": "Sea"}},
        )

    assert response.status_code == 200
    payload = response.json()
    assert payload["isError"] is True
    assert "primary_color" in payload["content"][0]["text"]
    assert provider.requests == []


@pytest.mark.asyncio
async def test_invoke_unknown_tool_returns_404():
    async with _client() as client:
        response = await client.post("/mcp", json={"name": "make_coffee"})

    assert response.status_code == 404
    assert "make_coffee" in response.json()["detail"]


@pytest.mark.asyncio
async def test_health_without_trailing_slash_is_served_directly():
    async with _client() as client:
        response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
