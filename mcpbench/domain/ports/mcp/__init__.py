"""
MCP Port Definitions.

This package defines the abstract interfaces (ports) the client facade
depends on. Implementations are provided by infrastructure adapters.
"""

from mcpbench.domain.ports.mcp.metrics_port import MetricsSinkPort
from mcpbench.domain.ports.mcp.session_port import MCPSessionPort

__all__ = [
    "MCPSessionPort",
    "MetricsSinkPort",
]
