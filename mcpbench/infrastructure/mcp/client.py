"""
MCP client facade.

The object callers hold: a live session, the call context bound at
construction, and a shared metrics sink. Every operation records
exactly one metrics observation, whether it succeeds or fails.

Operations may be issued concurrently on one client; the client keeps
no per-call state of its own.
"""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable, Mapping
from types import TracebackType
from typing import Any, TypeVar

from mcp import types
from pydantic import BaseModel, ValidationError

from mcpbench.domain.exceptions import ConfigError, RemoteCallError
from mcpbench.domain.model.mcp.listing import (
    ListAllParams,
    ListAllPromptsResult,
    ListAllResourcesResult,
    ListAllToolsResult,
)
from mcpbench.domain.ports.mcp import MCPSessionPort, MetricsSinkPort
from mcpbench.infrastructure.mcp.context import CallContext
from mcpbench.infrastructure.mcp.pagination import Page, PaginationAggregator

logger = logging.getLogger(__name__)

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)

DEFAULT_PING_TIMEOUT = 5.0


def _coerce_params(model: type[M], value: M | Mapping[str, Any] | None, required: bool = False) -> M | None:
    """Accept an SDK params model or a plain mapping validated into one."""
    if value is None:
        if required:
            raise ConfigError(f"{model.__name__} is required")
        return None
    if isinstance(value, model):
        return value
    if isinstance(value, Mapping):
        try:
            return model.model_validate(dict(value))
        except ValidationError as e:
            raise ConfigError(f"invalid {model.__name__}: {e}", original_error=e) from e
    raise ConfigError(f"expected {model.__name__} or mapping, got {type(value).__name__}")


class MCPClient:
    """
    Facade over one MCP session.

    Usage:
        async with await factory.streamable_http_client({"base_url": url}) as client:
            if await client.ping():
                tools = await client.list_all_tools()
                result = await client.call_tool({"name": "echo", "arguments": {"text": "hi"}})
    """

    def __init__(
        self,
        session: MCPSessionPort,
        context: CallContext,
        metrics: MetricsSinkPort,
        aggregator: PaginationAggregator | None = None,
        ping_timeout: float = DEFAULT_PING_TIMEOUT,
    ) -> None:
        self._session = session
        self._context = context
        self._metrics = metrics
        self._aggregator = aggregator or PaginationAggregator(context)
        self._ping_timeout = ping_timeout
        self.last_ping_error: BaseException | None = None

    @property
    def session(self) -> MCPSessionPort:
        return self._session

    @property
    def context(self) -> CallContext:
        return self._context

    @property
    def server_info(self) -> types.Implementation | None:
        return getattr(self._session, "server_info", None)

    @property
    def server_capabilities(self) -> types.ServerCapabilities | None:
        return getattr(self._session, "server_capabilities", None)

    async def _observe(self, operation: str, call: Callable[[], Awaitable[T]]) -> T:
        """Run ``call`` and push exactly one observation for it."""
        start = time.perf_counter()
        error: BaseException | None = None
        try:
            return await call()
        except BaseException as e:
            error = e
            raise
        finally:
            self._metrics.push(operation, time.perf_counter() - start, error)

    async def _remote_call(self, operation: str, call: Callable[[], Awaitable[T]]) -> T:
        """Single remote call under the client's context, failures as RemoteCallError."""

        async def invoke() -> T:
            try:
                return await self._context.run(call, operation)
            except RemoteCallError:
                raise
            except Exception as e:
                raise RemoteCallError(operation, original_error=e) from e

        return await self._observe(operation, invoke)

    # ------------------------------------------------------------------
    # Liveness
    # ------------------------------------------------------------------

    async def ping(self) -> bool:
        """
        Check that the server answers.

        Returns:
            True if the ping succeeded, False for any failure. Failures
            are never raised; the last one is kept in ``last_ping_error``.
        """

        async def send() -> None:
            async with asyncio.timeout(self._ping_timeout):
                await self._session.send_ping()

        try:
            await self._remote_call("Ping", send)
        except Exception as e:
            cause = e.original_error if isinstance(e, RemoteCallError) and e.original_error else e
            self.last_ping_error = cause
            logger.debug(f"MCP ping failed: {cause!r}")
            return False

        self.last_ping_error = None
        return True

    # ------------------------------------------------------------------
    # Single-call operations
    # ------------------------------------------------------------------

    async def list_tools(
        self, params: types.PaginatedRequestParams | Mapping[str, Any] | None = None
    ) -> types.ListToolsResult:
        """Fetch one page of tools, passing cursor and metadata through unchanged."""
        request = _coerce_params(types.PaginatedRequestParams, params)
        return await self._remote_call("ListTools", lambda: self._session.list_tools(request))

    async def list_resources(
        self, params: types.PaginatedRequestParams | Mapping[str, Any] | None = None
    ) -> types.ListResourcesResult:
        """Fetch one page of resources."""
        request = _coerce_params(types.PaginatedRequestParams, params)
        return await self._remote_call("ListResources", lambda: self._session.list_resources(request))

    async def list_prompts(
        self, params: types.PaginatedRequestParams | Mapping[str, Any] | None = None
    ) -> types.ListPromptsResult:
        """Fetch one page of prompts."""
        request = _coerce_params(types.PaginatedRequestParams, params)
        return await self._remote_call("ListPrompts", lambda: self._session.list_prompts(request))

    async def read_resource(
        self, params: types.ReadResourceRequestParams | Mapping[str, Any]
    ) -> types.ReadResourceResult:
        request = _coerce_params(types.ReadResourceRequestParams, params, required=True)
        return await self._remote_call("ReadResource", lambda: self._session.read_resource(request))

    async def get_prompt(
        self, params: types.GetPromptRequestParams | Mapping[str, Any]
    ) -> types.GetPromptResult:
        request = _coerce_params(types.GetPromptRequestParams, params, required=True)
        return await self._remote_call("GetPrompt", lambda: self._session.get_prompt(request))

    async def call_tool(
        self, params: types.CallToolRequestParams | Mapping[str, Any]
    ) -> types.CallToolResult:
        """
        Invoke a tool.

        Runs under the client's call context, so cancelling the context
        interrupts a long-running tool call.

        Raises:
            RemoteCallError: Transport or protocol failure. A tool that
                reports its own failure (``isError``) is a successful call.
        """
        request = _coerce_params(types.CallToolRequestParams, params, required=True)
        return await self._remote_call("CallTool", lambda: self._session.call_tool(request))

    # ------------------------------------------------------------------
    # List-all operations
    # ------------------------------------------------------------------

    @staticmethod
    def _page_params(cursor: str, meta: types.RequestParams.Meta) -> types.PaginatedRequestParams:
        # An empty cursor is never sent; the field is omitted instead.
        data: dict[str, Any] = {"_meta": meta}
        if cursor:
            data["cursor"] = cursor
        return types.PaginatedRequestParams.model_validate(data)

    @staticmethod
    def _meta_for(params: ListAllParams | Mapping[str, Any] | None) -> types.RequestParams.Meta:
        # Validated once, before any page is requested or observed.
        request = ListAllParams.from_value(params)
        return _coerce_params(types.RequestParams.Meta, request.meta or {}, required=True)

    async def list_all_tools(
        self, params: ListAllParams | Mapping[str, Any] | None = None
    ) -> ListAllToolsResult:
        """Follow every cursor and return all tools in server order."""
        meta = self._meta_for(params)

        async def fetch(cursor: str) -> Page[types.Tool]:
            result = await self._session.list_tools(self._page_params(cursor, meta))
            return Page(result.tools, result.nextCursor)

        tools = await self._observe("ListAllTools", lambda: self._aggregator.aggregate(fetch, "ListAllTools"))
        return ListAllToolsResult(tools=tools)

    async def list_all_resources(
        self, params: ListAllParams | Mapping[str, Any] | None = None
    ) -> ListAllResourcesResult:
        """Follow every cursor and return all resources in server order."""
        meta = self._meta_for(params)

        async def fetch(cursor: str) -> Page[types.Resource]:
            result = await self._session.list_resources(self._page_params(cursor, meta))
            return Page(result.resources, result.nextCursor)

        resources = await self._observe(
            "ListAllResources", lambda: self._aggregator.aggregate(fetch, "ListAllResources")
        )
        return ListAllResourcesResult(resources=resources)

    async def list_all_prompts(
        self, params: ListAllParams | Mapping[str, Any] | None = None
    ) -> ListAllPromptsResult:
        """Follow every cursor and return all prompts in server order."""
        meta = self._meta_for(params)

        async def fetch(cursor: str) -> Page[types.Prompt]:
            result = await self._session.list_prompts(self._page_params(cursor, meta))
            return Page(result.prompts, result.nextCursor)

        prompts = await self._observe("ListAllPrompts", lambda: self._aggregator.aggregate(fetch, "ListAllPrompts"))
        return ListAllPromptsResult(prompts=prompts)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def aclose(self) -> None:
        """Release the session. Must run in the task that created the client."""
        await self._session.aclose()

    async def __aenter__(self) -> "MCPClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()
