"""End-to-end tests over Streamable HTTP against an in-process FastMCP server."""

import pytest

from mcpbench.domain.exceptions import ConnectionErrorKind, MCPConnectionError
from mcpbench.infrastructure.mcp.factory import MCPClientFactory
from mcpbench.infrastructure.mcp.host import HostEnvironment
from mcpbench.tests.fakes import RecordingMetricsSink
from mcpbench.tests.fixtures.echo_server import build_server
from mcpbench.tests.integration.http_server import HeaderRecorder, serve


@pytest.fixture
def recorder():
    return HeaderRecorder(build_server().streamable_http_app())


@pytest.fixture
def base_url(recorder):
    with serve(recorder) as url:
        yield f"{url}/mcp"


@pytest.fixture
def host():
    return HostEnvironment(metrics=RecordingMetricsSink())


@pytest.fixture
def factory(host, settings):
    return MCPClientFactory(host, settings=settings)


@pytest.mark.integration
class TestStreamableHTTPClient:
    async def test_bearer_token_on_every_request(self, factory, host, base_url, recorder):
        config = {"base_url": base_url, "auth": {"bearer_token": "tok-123"}}

        async with await factory.streamable_http_client(config) as client:
            assert client.server_info.name == "mcpbench-echo"
            assert await client.ping() is True

            tools = await client.list_all_tools()
            assert {t.name for t in tools.tools} == {"echo", "env"}

            result = await client.call_tool({"name": "echo", "arguments": {"text": "over http"}})
            assert result.content[0].text == "over http"

        assert recorder.requests
        assert recorder.authorizations == {b"Bearer tok-123"}
        assert "POST" in recorder.methods
        assert [o.operation for o in host.metrics.observations] == ["Ping", "ListAllTools", "CallTool"]

    async def test_no_authorization_without_token(self, factory, base_url, recorder):
        async with await factory.streamable_http_client({"base_url": base_url}) as client:
            assert await client.ping() is True
            await client.list_all_tools()
            await client.call_tool({"name": "echo", "arguments": {"text": "x"}})

        assert recorder.requests
        assert recorder.authorizations == {None}

    async def test_unreachable_endpoint_is_connection_error(self, factory):
        with pytest.raises(MCPConnectionError) as exc_info:
            await factory.streamable_http_client({"base_url": "http://127.0.0.1:9/mcp"})

        assert exc_info.value.kind is ConnectionErrorKind.HANDSHAKE
