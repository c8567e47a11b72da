"""Tiny MCP server used by the integration tests.

Run by path for stdio; the HTTP tests mount ``build_server().sse_app()``
or ``build_server().streamable_http_app()`` in-process.
"""

import os

from mcp.server.fastmcp import FastMCP


def build_server() -> FastMCP:
    """Create a fresh server; an HTTP app can only be served once per instance."""
    mcp = FastMCP("mcpbench-echo")

    @mcp.tool()
    def echo(text: str) -> str:
        """Return the input text."""
        return text

    @mcp.tool()
    def env(name: str) -> str:
        """Return an environment variable of the server process."""
        return os.environ.get(name, "")

    @mcp.resource("echo://greeting")
    def greeting() -> str:
        return "hello from mcpbench"

    @mcp.prompt()
    def greet(name: str) -> str:
        return f"Say hello to {name}"

    return mcp


if __name__ == "__main__":
    build_server().run("stdio")
