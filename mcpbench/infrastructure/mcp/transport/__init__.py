"""
MCP Transport Layer.

Transport handles for the three supported channels:
- stdio: Subprocess communication (local MCP servers)
- sse: One-way streaming HTTP (Server-Sent Events)
- streamable_http: Bidirectional streaming HTTP
"""

from mcpbench.infrastructure.mcp.transport.base import TransportHandle
from mcpbench.infrastructure.mcp.transport.factory import TransportFactory
from mcpbench.infrastructure.mcp.transport.sse import SSETransportHandle
from mcpbench.infrastructure.mcp.transport.stdio import StdioTransportHandle
from mcpbench.infrastructure.mcp.transport.streamable_http import StreamableHTTPTransportHandle

__all__ = [
    "TransportHandle",
    "TransportFactory",
    "StdioTransportHandle",
    "SSETransportHandle",
    "StreamableHTTPTransportHandle",
]
