"""
MCP client construction.

Three constructors, one per transport, each taking either the typed
config or the caller-visible mapping form:

    factory = MCPClientFactory(HostEnvironment(metrics=create_metrics_sink()))
    stdio = await factory.stdio_client({"path": "uvx", "args": ["mcp-server-time"]})
    sse = await factory.sse_client({"base_url": "http://localhost:8000/sse"})
    http = await factory.streamable_http_client(
        {"base_url": "http://localhost:8000/mcp", "auth": {"bearer_token": token}}
    )
"""

import logging
from collections.abc import Mapping
from typing import Any

from mcpbench.configuration.config import Settings, get_settings
from mcpbench.domain.exceptions import ConfigError
from mcpbench.domain.model.mcp.client_config import (
    ClientConfig,
    SSEClientConfig,
    StdioClientConfig,
    StreamableHTTPClientConfig,
)
from mcpbench.infrastructure.mcp.client import MCPClient
from mcpbench.infrastructure.mcp.connector import SessionConnector
from mcpbench.infrastructure.mcp.host import HostEnvironment
from mcpbench.infrastructure.mcp.pagination import PaginationAggregator
from mcpbench.infrastructure.mcp.transport.factory import TransportFactory

logger = logging.getLogger(__name__)


class MCPClientFactory:
    """
    Builds connected MCPClient facades for one run.

    Every client built here shares the host's call context and metrics
    sink; each gets its own transport and session.
    """

    def __init__(
        self,
        host: HostEnvironment | None = None,
        settings: Settings | None = None,
        connector: SessionConnector | None = None,
        transports: TransportFactory | None = None,
    ) -> None:
        self.host = host or HostEnvironment()
        self.settings = settings or get_settings()
        self.connector = connector or SessionConnector(settings=self.settings)
        self.transports = transports or TransportFactory(self.host, self.settings)

    async def stdio_client(self, config: StdioClientConfig | Mapping[str, Any]) -> MCPClient:
        """Launch a local MCP server subprocess and connect to it."""
        return await self._connect(self._coerce(StdioClientConfig, config))

    async def sse_client(self, config: SSEClientConfig | Mapping[str, Any]) -> MCPClient:
        """Connect to an SSE endpoint. No connect timeout applies."""
        return await self._connect(self._coerce(SSEClientConfig, config))

    async def streamable_http_client(
        self, config: StreamableHTTPClientConfig | Mapping[str, Any]
    ) -> MCPClient:
        """Connect to a Streamable HTTP endpoint."""
        return await self._connect(self._coerce(StreamableHTTPClientConfig, config))

    @staticmethod
    def _coerce(config_cls: type, config: Any) -> ClientConfig:
        if isinstance(config, config_cls):
            return config
        if isinstance(config, Mapping):
            return config_cls.from_dict(config)
        raise ConfigError(f"expected {config_cls.__name__} or mapping, got {type(config).__name__}")

    async def _connect(self, config: ClientConfig) -> MCPClient:
        transport = self.transports.create(config)
        session = await self.connector.connect(transport)

        aggregator = PaginationAggregator(
            self.host.context,
            max_pages=self.settings.mcp_pagination_max_pages,
            detect_cursor_cycles=self.settings.mcp_pagination_detect_cycles,
        )
        client = MCPClient(
            session,
            context=self.host.context,
            metrics=self.host.metrics,
            aggregator=aggregator,
            ping_timeout=self.settings.mcp_ping_timeout,
        )
        logger.info(f"MCP {config.kind.value} client ready: {config.endpoint}")
        return client
