"""
Session connector for MCP.

Opens a transport handle, runs the initialize handshake and returns a
live session. Connect attempts are never retried here.
"""

import asyncio
import logging
from contextlib import AsyncExitStack

from mcp import ClientSession, types

from mcpbench.configuration.config import Settings, get_settings
from mcpbench.domain.exceptions import ConnectionErrorKind, MCPConnectionError
from mcpbench.infrastructure.mcp.session import MCPSession
from mcpbench.infrastructure.mcp.transport.base import TransportHandle

logger = logging.getLogger(__name__)


class SessionConnector:
    """
    Connects transport handles to MCP sessions.

    The connect deadline applies to the stdio and Streamable HTTP
    transports and is measured from the start of the attempt, covering
    process start or first request plus the handshake. SSE transports
    connect without a deadline; callers that need one cancel the task.
    """

    def __init__(
        self,
        client_info: types.Implementation | None = None,
        connect_timeout: float | None = None,
        settings: Settings | None = None,
    ) -> None:
        settings = settings or get_settings()
        self.client_info = client_info or types.Implementation(
            name=settings.mcp_client_name,
            version=settings.mcp_client_version,
        )
        self.connect_timeout = connect_timeout if connect_timeout is not None else settings.mcp_connect_timeout

    def timeout_for(self, transport: TransportHandle) -> float | None:
        """Connect deadline for a transport, or None for no deadline."""
        return self.connect_timeout if transport.uses_connect_timeout else None

    async def connect(self, transport: TransportHandle) -> MCPSession:
        """
        Establish a session over ``transport``.

        Args:
            transport: Unused transport handle; consumed by this call.

        Returns:
            Initialized MCPSession owning the transport.

        Raises:
            MCPConnectionError: ``kind=TIMEOUT`` if the deadline passes,
                ``kind=HANDSHAKE`` for any other failure.
        """
        timeout = self.timeout_for(transport)
        logger.info(
            f"Connecting to MCP server via {transport.kind.value}: {transport.endpoint} "
            f"(timeout={timeout if timeout is not None else 'none'})"
        )

        exit_stack = AsyncExitStack()
        try:
            async with asyncio.timeout(timeout):
                read_stream, write_stream = await exit_stack.enter_async_context(transport.open())
                session = await exit_stack.enter_async_context(
                    ClientSession(read_stream, write_stream, client_info=self.client_info)
                )
                result = await session.initialize()
        except asyncio.CancelledError:
            await self._release(exit_stack, transport)
            raise
        except TimeoutError as e:
            await self._release(exit_stack, transport)
            logger.error(f"MCP connect to {transport.endpoint} timed out after {timeout}s")
            raise MCPConnectionError(
                ConnectionErrorKind.TIMEOUT,
                endpoint=transport.endpoint,
                message=f"connection error: timed out after {timeout}s",
                original_error=e,
            ) from e
        except Exception as e:
            await self._release(exit_stack, transport)
            logger.error(f"MCP connect to {transport.endpoint} failed: {e}")
            raise MCPConnectionError(
                ConnectionErrorKind.HANDSHAKE,
                endpoint=transport.endpoint,
                message="connection error: handshake failed",
                original_error=e,
            ) from e

        server = result.serverInfo
        logger.info(
            f"Connected to MCP server {server.name} {server.version} "
            f"(protocol {result.protocolVersion}) via {transport.kind.value}"
        )
        return MCPSession(session, exit_stack, endpoint=transport.endpoint, initialize_result=result)

    @staticmethod
    async def _release(exit_stack: AsyncExitStack, transport: TransportHandle) -> None:
        """Tear down a half-open transport, keeping the original failure."""
        try:
            await exit_stack.aclose()
        except Exception as e:
            logger.warning(f"Error releasing {transport.kind.value} transport {transport.endpoint}: {e}")
