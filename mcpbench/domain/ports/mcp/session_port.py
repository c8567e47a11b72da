"""
MCPSessionPort - Abstract interface for a live MCP session.

This port is the contract the client facade needs from the protocol
engine: typed request methods on an already-initialized session.
Implementations must be safe for concurrent use from multiple tasks.
"""

from abc import abstractmethod
from typing import Protocol, runtime_checkable

from mcp import types


@runtime_checkable
class MCPSessionPort(Protocol):
    """
    Abstract interface for an initialized MCP session.

    Errors from the wire (transport failures, JSON-RPC error responses)
    propagate unchanged; wrapping them is the caller's job.
    """

    @abstractmethod
    async def send_ping(self) -> None:
        """Issue a liveness check."""
        ...

    @abstractmethod
    async def list_tools(
        self, params: types.PaginatedRequestParams | None = None
    ) -> types.ListToolsResult:
        """Fetch one page of tools."""
        ...

    @abstractmethod
    async def list_resources(
        self, params: types.PaginatedRequestParams | None = None
    ) -> types.ListResourcesResult:
        """Fetch one page of resources."""
        ...

    @abstractmethod
    async def list_prompts(
        self, params: types.PaginatedRequestParams | None = None
    ) -> types.ListPromptsResult:
        """Fetch one page of prompts."""
        ...

    @abstractmethod
    async def read_resource(self, params: types.ReadResourceRequestParams) -> types.ReadResourceResult:
        """Read a resource by URI."""
        ...

    @abstractmethod
    async def get_prompt(self, params: types.GetPromptRequestParams) -> types.GetPromptResult:
        """Render a prompt with arguments."""
        ...

    @abstractmethod
    async def call_tool(self, params: types.CallToolRequestParams) -> types.CallToolResult:
        """
        Invoke a tool.

        Args:
            params: Tool name, arguments and optional request metadata.

        Returns:
            The tool result as sent by the server, including tool-level
            errors reported through ``isError``.
        """
        ...

    @abstractmethod
    async def aclose(self) -> None:
        """
        Release the session and its transport.

        Should be idempotent.
        """
        ...
