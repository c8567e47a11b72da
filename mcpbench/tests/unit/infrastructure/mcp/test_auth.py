"""Unit tests for bearer token client decoration."""

import httpx
import pytest

from mcpbench.domain.model.mcp.client_config import AuthConfig
from mcpbench.infrastructure.mcp.auth import BearerTokenAuth, decorate_client


def recording_client() -> tuple[httpx.AsyncClient, list[httpx.Request]]:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={})

    return httpx.AsyncClient(transport=httpx.MockTransport(handler)), seen


@pytest.mark.unit
class TestDecorateClient:
    async def test_token_adds_authorization_header(self):
        client, seen = recording_client()

        decorated = decorate_client(client, AuthConfig(bearer_token="s3cret"))
        async with decorated:
            await decorated.post("http://mcp.test/mcp", json={"jsonrpc": "2.0"})
            await decorated.get("http://mcp.test/mcp")

        assert decorated is client
        assert [r.headers["Authorization"] for r in seen] == ["Bearer s3cret", "Bearer s3cret"]

    async def test_no_token_leaves_client_untouched(self):
        client, seen = recording_client()
        original_auth = client.auth

        decorated = decorate_client(client, AuthConfig())
        async with decorated:
            await decorated.get("http://mcp.test/mcp")

        assert decorated is client
        assert client.auth is original_auth
        assert "Authorization" not in seen[0].headers

    def test_auth_flow_overrides_existing_header(self):
        request = httpx.Request("GET", "http://mcp.test/", headers={"Authorization": "Basic old"})

        flow = BearerTokenAuth("tok").auth_flow(request)
        sent = next(flow)

        assert sent.headers["Authorization"] == "Bearer tok"
