"""In-memory fakes for the session and metrics ports."""

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass, field

from mcp import types


@dataclass
class Observation:
    operation: str
    duration: float
    error: BaseException | None


@dataclass
class RecordingMetricsSink:
    """MetricsSinkPort fake that keeps every observation."""

    observations: list[Observation] = field(default_factory=list)

    def push(self, operation: str, duration: float, error: BaseException | None = None) -> None:
        self.observations.append(Observation(operation, duration, error))

    def for_operation(self, operation: str) -> list[Observation]:
        return [o for o in self.observations if o.operation == operation]


def make_tool(name: str) -> types.Tool:
    return types.Tool(name=name, inputSchema={"type": "object"})


def make_resource(name: str) -> types.Resource:
    return types.Resource(name=name, uri=f"file:///{name}")


def make_prompt(name: str) -> types.Prompt:
    return types.Prompt(name=name)


class FakeSession:
    """
    MCPSessionPort fake serving scripted pages.

    ``pages`` maps the cursor received ("" for none) to
    ``(items, next_cursor)`` or to an exception to raise.
    """

    def __init__(
        self,
        tool_pages: dict[str, tuple[Sequence, str | None] | Exception] | None = None,
        resource_pages: dict[str, tuple[Sequence, str | None] | Exception] | None = None,
        prompt_pages: dict[str, tuple[Sequence, str | None] | Exception] | None = None,
    ) -> None:
        self.tool_pages = tool_pages or {"": ([], None)}
        self.resource_pages = resource_pages or {"": ([], None)}
        self.prompt_pages = prompt_pages or {"": ([], None)}
        self.requests: list[tuple[str, object]] = []
        self.ping_error: Exception | None = None
        self.call_tool_result = types.CallToolResult(content=[types.TextContent(type="text", text="ok")])
        self.call_tool_error: Exception | None = None
        self.closed = False

    def _page(self, method: str, pages: dict, params: types.PaginatedRequestParams | None):
        self.requests.append((method, params))
        cursor = (params.cursor if params else None) or ""
        page = pages[cursor]
        if isinstance(page, Exception):
            raise page
        return page

    def cursors(self, method: str) -> list[str | None]:
        return [p.cursor if p else None for m, p in self.requests if m == method]

    async def send_ping(self) -> None:
        self.requests.append(("ping", None))
        if self.ping_error:
            raise self.ping_error

    async def list_tools(self, params=None) -> types.ListToolsResult:
        items, cursor = self._page("tools/list", self.tool_pages, params)
        return types.ListToolsResult.model_construct(tools=list(items), nextCursor=cursor)

    async def list_resources(self, params=None) -> types.ListResourcesResult:
        items, cursor = self._page("resources/list", self.resource_pages, params)
        return types.ListResourcesResult.model_construct(resources=list(items), nextCursor=cursor)

    async def list_prompts(self, params=None) -> types.ListPromptsResult:
        items, cursor = self._page("prompts/list", self.prompt_pages, params)
        return types.ListPromptsResult.model_construct(prompts=list(items), nextCursor=cursor)

    async def read_resource(self, params) -> types.ReadResourceResult:
        self.requests.append(("resources/read", params))
        return types.ReadResourceResult(
            contents=[types.TextResourceContents(uri=params.uri, text="contents")]
        )

    async def get_prompt(self, params) -> types.GetPromptResult:
        self.requests.append(("prompts/get", params))
        return types.GetPromptResult(
            messages=[
                types.PromptMessage(role="user", content=types.TextContent(type="text", text=params.name))
            ]
        )

    async def call_tool(self, params) -> types.CallToolResult:
        self.requests.append(("tools/call", params))
        if self.call_tool_error:
            raise self.call_tool_error
        return self.call_tool_result

    async def aclose(self) -> None:
        self.closed = True


class BlockingSession(FakeSession):
    """FakeSession whose second tools page never arrives until released."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.second_page_requested = asyncio.Event()
        self.release = asyncio.Event()

    async def list_tools(self, params=None) -> types.ListToolsResult:
        if params is not None and params.cursor:
            self.requests.append(("tools/list", params))
            self.second_page_requested.set()
            await self.release.wait()
            return types.ListToolsResult(tools=[], nextCursor=None)
        return await super().list_tools(params)
