"""
Stdio transport handle for MCP.

Launches the MCP server as a subprocess and talks JSON-RPC over its
stdin/stdout via the SDK's ``stdio_client``.
"""

import os
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from mcp.client.stdio import StdioServerParameters, stdio_client

from mcpbench.domain.model.mcp.client_config import StdioClientConfig, TransportKind
from mcpbench.infrastructure.mcp.transport.base import TransportHandle, TransportStreams


class StdioTransportHandle(TransportHandle):
    """Subprocess transport. Subject to the connect timeout."""

    kind = TransportKind.STDIO

    def __init__(self, config: StdioClientConfig) -> None:
        super().__init__()
        self.config = config

    @property
    def endpoint(self) -> str:
        return self.config.endpoint

    def server_params(self) -> StdioServerParameters:
        """Launch parameters, with the parent environment read at call time."""
        # Overrides are added to the inherited environment, never substituted for it
        return StdioServerParameters(
            command=self.config.path,
            args=list(self.config.args),
            env={**os.environ, **self.config.env},
        )

    @asynccontextmanager
    async def _open(self) -> AsyncIterator[TransportStreams]:
        params = self.server_params()
        if self.config.debug:
            async with stdio_client(params, errlog=sys.stderr) as (read, write):
                yield read, write
            return

        with open(os.devnull, "w") as devnull:
            async with stdio_client(params, errlog=devnull) as (read, write):
                yield read, write
