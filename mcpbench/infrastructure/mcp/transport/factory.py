"""
Transport factory for MCP.

Creates the transport handle matching a client configuration, giving
streaming transports their own freshly built HTTP client.
"""

import logging

from mcpbench.configuration.config import Settings, get_settings
from mcpbench.domain.exceptions import ConfigError
from mcpbench.domain.model.mcp.client_config import (
    ClientConfig,
    SSEClientConfig,
    StdioClientConfig,
    StreamableHTTPClientConfig,
)
from mcpbench.infrastructure.mcp.host import HostEnvironment
from mcpbench.infrastructure.mcp.http_client import build_http_client
from mcpbench.infrastructure.mcp.transport.base import TransportHandle
from mcpbench.infrastructure.mcp.transport.sse import SSETransportHandle
from mcpbench.infrastructure.mcp.transport.stdio import StdioTransportHandle
from mcpbench.infrastructure.mcp.transport.streamable_http import StreamableHTTPTransportHandle

logger = logging.getLogger(__name__)


class TransportFactory:
    """
    Factory for creating MCP transport handles.

    One factory serves every client of a run; each ``create`` call
    returns a new handle that must not be reused across connections.
    """

    def __init__(self, host: HostEnvironment, settings: Settings | None = None) -> None:
        self._host = host
        self._settings = settings or get_settings()

    def create(self, config: ClientConfig) -> TransportHandle:
        """
        Create a transport handle from configuration.

        Args:
            config: Validated client configuration.

        Returns:
            Ready-to-open transport handle.

        Raises:
            ConfigError: If the configuration type is not supported.
        """
        if isinstance(config, StdioClientConfig):
            handle: TransportHandle = StdioTransportHandle(config)
        elif isinstance(config, SSEClientConfig):
            handle = SSETransportHandle(
                config,
                http_client=build_http_client(self._host, config.auth, self._settings),
                timeout=self._settings.mcp_http_timeout,
                sse_read_timeout=self._settings.mcp_sse_read_timeout,
            )
        elif isinstance(config, StreamableHTTPClientConfig):
            handle = StreamableHTTPTransportHandle(
                config,
                http_client=build_http_client(self._host, config.auth, self._settings),
            )
        else:
            raise ConfigError(f"unsupported client config: {type(config).__name__}")

        logger.debug(f"Created {handle.kind.value} transport handle for {handle.endpoint}")
        return handle
