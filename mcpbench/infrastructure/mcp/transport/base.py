"""
Base transport handle for MCP.

A transport handle describes one ready-to-open channel to an MCP
server and owns whatever it needs to open it (a command line, an HTTP
client). Opening it yields the read/write message streams a
``mcp.ClientSession`` runs on. Handles are single use.
"""

import logging
from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from typing import Any

from mcpbench.domain.model.mcp.client_config import TransportKind

logger = logging.getLogger(__name__)

# (read_stream, write_stream) as produced by the SDK transport clients
TransportStreams = tuple[Any, Any]


class TransportHandle(ABC):
    """
    Abstract base class for MCP transport handles.

    Subclasses keep their transport-specific settings to themselves;
    the connector only relies on ``open()`` and the timeout policy.
    """

    kind: TransportKind

    #: Whether the connector applies its fixed connect deadline.
    uses_connect_timeout: bool = True

    def __init__(self) -> None:
        self._opened = False

    @property
    @abstractmethod
    def endpoint(self) -> str:
        """Endpoint description (URL or command line) for logs and errors."""
        ...

    def open(self) -> AbstractAsyncContextManager[TransportStreams]:
        """
        Open the channel.

        Returns:
            Async context manager yielding ``(read_stream, write_stream)``.

        Raises:
            RuntimeError: If the handle was already opened once.
        """
        if self._opened:
            raise RuntimeError(f"{self.kind.value} transport handle for {self.endpoint} already used")
        self._opened = True
        logger.debug(f"Opening {self.kind.value} transport: {self.endpoint}")
        return self._open()

    @abstractmethod
    def _open(self) -> AbstractAsyncContextManager[TransportStreams]:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(endpoint={self.endpoint!r})"
