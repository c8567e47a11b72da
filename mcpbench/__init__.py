"""mcpbench - MCP client toolkit for load and soak testing MCP servers."""

from mcpbench.domain.exceptions import (
    AggregationError,
    CallCancelledError,
    ConfigError,
    MCPConnectionError,
    MCPError,
    RemoteCallError,
)
from mcpbench.domain.model.mcp import (
    AuthConfig,
    ListAllParams,
    SSEClientConfig,
    StdioClientConfig,
    StreamableHTTPClientConfig,
)
from mcpbench.infrastructure.mcp import (
    CallContext,
    Dialer,
    HostEnvironment,
    MCPClient,
    MCPClientFactory,
    TLSConfig,
)
from mcpbench.infrastructure.telemetry import create_metrics_sink

__version__ = "0.1.0"

__all__ = [
    "MCPClient",
    "MCPClientFactory",
    "HostEnvironment",
    "TLSConfig",
    "Dialer",
    "CallContext",
    "AuthConfig",
    "StdioClientConfig",
    "SSEClientConfig",
    "StreamableHTTPClientConfig",
    "ListAllParams",
    "create_metrics_sink",
    "MCPError",
    "ConfigError",
    "MCPConnectionError",
    "RemoteCallError",
    "CallCancelledError",
    "AggregationError",
]
