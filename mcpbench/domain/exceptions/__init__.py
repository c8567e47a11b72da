"""
Domain exceptions for mcpbench.

This module provides the hierarchy of exceptions raised by client
construction, connection and remote calls.
"""

from mcpbench.domain.exceptions.mcp import (
    AggregationError,
    AggregationErrorKind,
    CallCancelledError,
    ConfigError,
    ConnectionErrorKind,
    MCPConnectionError,
    MCPError,
    RemoteCallError,
)

__all__ = [
    "MCPError",
    "ConfigError",
    "ConnectionErrorKind",
    "MCPConnectionError",
    "RemoteCallError",
    "CallCancelledError",
    "AggregationErrorKind",
    "AggregationError",
]
