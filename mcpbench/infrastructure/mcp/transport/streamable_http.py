"""
Streamable HTTP transport handle for MCP.

Bidirectional streaming HTTP via the SDK's ``streamable_http_client``.
The SDK leaves a caller-provided client open, so this handle closes
its client when the transport is released.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from mcp.client.streamable_http import streamable_http_client

from mcpbench.domain.model.mcp.client_config import StreamableHTTPClientConfig, TransportKind
from mcpbench.infrastructure.mcp.transport.base import TransportHandle, TransportStreams


class StreamableHTTPTransportHandle(TransportHandle):
    """Bidirectional streaming HTTP transport. Subject to the connect timeout."""

    kind = TransportKind.STREAMABLE_HTTP

    def __init__(self, config: StreamableHTTPClientConfig, http_client: httpx.AsyncClient) -> None:
        super().__init__()
        self.config = config
        self.http_client = http_client

    @property
    def endpoint(self) -> str:
        return self.config.base_url

    @asynccontextmanager
    async def _open(self) -> AsyncIterator[TransportStreams]:
        async with self.http_client:
            async with streamable_http_client(
                self.config.base_url, http_client=self.http_client
            ) as (read, write, _get_session_id):
                yield read, write
