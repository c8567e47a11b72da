"""
SSE transport handle for MCP.

One-way streaming HTTP: server messages arrive on a long-lived event
stream, client messages are POSTed to the endpoint the server
announces. No connect timeout is imposed on this transport.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from mcp.client.sse import sse_client

from mcpbench.domain.model.mcp.client_config import SSEClientConfig, TransportKind
from mcpbench.infrastructure.mcp.transport.base import TransportHandle, TransportStreams


class SSETransportHandle(TransportHandle):
    """One-way streaming HTTP transport carrying its own httpx client."""

    kind = TransportKind.SSE
    uses_connect_timeout = False

    def __init__(
        self,
        config: SSEClientConfig,
        http_client: httpx.AsyncClient,
        timeout: float,
        sse_read_timeout: float,
    ) -> None:
        super().__init__()
        self.config = config
        self.http_client = http_client
        self.timeout = timeout
        self.sse_read_timeout = sse_read_timeout

    @property
    def endpoint(self) -> str:
        return self.config.base_url

    def _client_factory(
        self,
        headers: dict[str, str] | None = None,
        timeout: httpx.Timeout | None = None,
        auth: httpx.Auth | None = None,
    ) -> httpx.AsyncClient:
        # The SDK asks for a client and closes it when the stream ends;
        # hand over ours so TLS, proxy, dialer and auth settings survive.
        if headers:
            self.http_client.headers.update(headers)
        return self.http_client

    @asynccontextmanager
    async def _open(self) -> AsyncIterator[TransportStreams]:
        async with sse_client(
            self.config.base_url,
            timeout=self.timeout,
            sse_read_timeout=self.sse_read_timeout,
            httpx_client_factory=self._client_factory,
        ) as (read, write):
            yield read, write
