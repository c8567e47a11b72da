"""
MCP session adapter.

Wraps an initialized ``mcp.ClientSession`` together with the exit
stack that keeps its transport open, and exposes the typed calls of
``MCPSessionPort``. Requests are sent with their params verbatim so
cursors and ``_meta`` reach the server exactly as given.
"""

import logging
from contextlib import AsyncExitStack

from mcp import ClientSession, types

logger = logging.getLogger(__name__)


class MCPSession:
    """Live MCP session owned by exactly one client facade."""

    def __init__(
        self,
        session: ClientSession,
        exit_stack: AsyncExitStack,
        endpoint: str,
        initialize_result: types.InitializeResult | None = None,
    ) -> None:
        self._session = session
        self._exit_stack: AsyncExitStack | None = exit_stack
        self.endpoint = endpoint
        self.initialize_result = initialize_result

    @property
    def server_info(self) -> types.Implementation | None:
        return self.initialize_result.serverInfo if self.initialize_result else None

    @property
    def server_capabilities(self) -> types.ServerCapabilities | None:
        return self.initialize_result.capabilities if self.initialize_result else None

    @property
    def is_closed(self) -> bool:
        return self._exit_stack is None

    async def send_ping(self) -> None:
        await self._session.send_ping()

    async def list_tools(
        self, params: types.PaginatedRequestParams | None = None
    ) -> types.ListToolsResult:
        return await self._session.send_request(
            types.ClientRequest(types.ListToolsRequest(method="tools/list", params=params)),
            types.ListToolsResult,
        )

    async def list_resources(
        self, params: types.PaginatedRequestParams | None = None
    ) -> types.ListResourcesResult:
        return await self._session.send_request(
            types.ClientRequest(types.ListResourcesRequest(method="resources/list", params=params)),
            types.ListResourcesResult,
        )

    async def list_prompts(
        self, params: types.PaginatedRequestParams | None = None
    ) -> types.ListPromptsResult:
        return await self._session.send_request(
            types.ClientRequest(types.ListPromptsRequest(method="prompts/list", params=params)),
            types.ListPromptsResult,
        )

    async def read_resource(self, params: types.ReadResourceRequestParams) -> types.ReadResourceResult:
        return await self._session.send_request(
            types.ClientRequest(types.ReadResourceRequest(method="resources/read", params=params)),
            types.ReadResourceResult,
        )

    async def get_prompt(self, params: types.GetPromptRequestParams) -> types.GetPromptResult:
        return await self._session.send_request(
            types.ClientRequest(types.GetPromptRequest(method="prompts/get", params=params)),
            types.GetPromptResult,
        )

    async def call_tool(self, params: types.CallToolRequestParams) -> types.CallToolResult:
        return await self._session.send_request(
            types.ClientRequest(types.CallToolRequest(method="tools/call", params=params)),
            types.CallToolResult,
        )

    async def aclose(self) -> None:
        """Close the session and its transport. Idempotent."""
        if self._exit_stack is None:
            return
        exit_stack, self._exit_stack = self._exit_stack, None
        await exit_stack.aclose()
        logger.info(f"MCP session closed: {self.endpoint}")
