"""
MCP client domain models.

Key value objects:
- Client configuration per transport kind
- List-all request and result shapes
"""

from mcpbench.domain.model.mcp.client_config import (
    AuthConfig,
    ClientConfig,
    SSEClientConfig,
    StdioClientConfig,
    StreamableHTTPClientConfig,
    TransportKind,
)
from mcpbench.domain.model.mcp.listing import (
    ListAllParams,
    ListAllPromptsResult,
    ListAllResourcesResult,
    ListAllToolsResult,
)

__all__ = [
    # Configuration
    "TransportKind",
    "AuthConfig",
    "ClientConfig",
    "StdioClientConfig",
    "SSEClientConfig",
    "StreamableHTTPClientConfig",
    # Listing
    "ListAllParams",
    "ListAllToolsResult",
    "ListAllResourcesResult",
    "ListAllPromptsResult",
]
