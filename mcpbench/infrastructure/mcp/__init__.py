"""
MCP client infrastructure.

Transport selection, session establishment, the client facade with
cursor aggregation, and the host environment it is built from.
"""

from mcpbench.infrastructure.mcp.auth import BearerTokenAuth, decorate_client
from mcpbench.infrastructure.mcp.client import MCPClient
from mcpbench.infrastructure.mcp.connector import SessionConnector
from mcpbench.infrastructure.mcp.context import CallContext
from mcpbench.infrastructure.mcp.factory import MCPClientFactory
from mcpbench.infrastructure.mcp.host import Dialer, HostEnvironment, TLSConfig
from mcpbench.infrastructure.mcp.http_client import build_http_client
from mcpbench.infrastructure.mcp.pagination import Page, PaginationAggregator
from mcpbench.infrastructure.mcp.session import MCPSession

__all__ = [
    # Facade
    "MCPClient",
    "MCPClientFactory",
    # Connection
    "SessionConnector",
    "MCPSession",
    # Host environment
    "HostEnvironment",
    "TLSConfig",
    "Dialer",
    "CallContext",
    # HTTP
    "BearerTokenAuth",
    "decorate_client",
    "build_http_client",
    # Pagination
    "Page",
    "PaginationAggregator",
]
