"""
MCP client exceptions.

Exception hierarchy for everything the client surfaces to callers,
from construction through connect to individual remote calls.

Exception Hierarchy:
    MCPError (base)
    ├── ConfigError            - Malformed or incomplete construction input
    ├── MCPConnectionError     - Connect-time failure (timeout or handshake)
    ├── RemoteCallError        - A single remote call failed
    │   └── CallCancelledError - The facade's call context was cancelled
    └── AggregationError       - A list-all pagination loop failed
"""

from enum import Enum
from typing import Any


class MCPError(Exception):
    """Base exception for all MCP client errors."""

    def __init__(
        self,
        message: str,
        original_error: BaseException | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        self.details = details or {}

    def __str__(self) -> str:
        if self.original_error:
            return f"{self.message} (caused by: {self.original_error})"
        return self.message


class ConfigError(MCPError):
    """Raised when client construction input is malformed or incomplete."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        original_error: BaseException | None = None,
    ) -> None:
        self.field = field
        super().__init__(
            f"invalid config: {message}",
            original_error=original_error,
            details={"field": field},
        )


class ConnectionErrorKind(str, Enum):
    """Why a connect attempt failed."""

    TIMEOUT = "timeout"
    HANDSHAKE = "handshake"


class MCPConnectionError(MCPError):
    """Raised when establishing a session fails. Never retried."""

    def __init__(
        self,
        kind: ConnectionErrorKind,
        endpoint: str | None = None,
        message: str | None = None,
        original_error: BaseException | None = None,
    ) -> None:
        self.kind = kind
        self.endpoint = endpoint
        msg = message or f"connection error ({kind.value})"
        if endpoint:
            msg += f" (endpoint: {endpoint})"
        super().__init__(
            msg,
            original_error=original_error,
            details={"kind": kind.value, "endpoint": endpoint},
        )


class RemoteCallError(MCPError):
    """Raised when a single remote call fails.

    The facade stays usable after this error; later calls may succeed.
    """

    def __init__(
        self,
        operation: str,
        message: str | None = None,
        original_error: BaseException | None = None,
    ) -> None:
        self.operation = operation
        msg = message or f"{operation} failed"
        super().__init__(msg, original_error=original_error, details={"operation": operation})


class CallCancelledError(RemoteCallError):
    """Raised when a call is issued on, or interrupted by, a cancelled context."""

    def __init__(self, operation: str = "call", reason: str | None = None) -> None:
        self.reason = reason
        msg = f"{operation} cancelled"
        if reason:
            msg += f": {reason}"
        super().__init__(operation, message=msg)


class AggregationErrorKind(str, Enum):
    """Why a list-all loop stopped without a complete result."""

    PAGE_FAILED = "page_failed"
    CANCELLED = "cancelled"
    PAGE_LIMIT = "page_limit"
    CURSOR_CYCLE = "cursor_cycle"


class AggregationError(MCPError):
    """Raised when a list-all operation cannot produce a complete sequence.

    Items gathered before the failure are discarded, never returned.
    """

    def __init__(
        self,
        kind: AggregationErrorKind,
        message: str,
        pages_fetched: int = 0,
        original_error: BaseException | None = None,
    ) -> None:
        self.kind = kind
        self.pages_fetched = pages_fetched
        super().__init__(
            message,
            original_error=original_error,
            details={"kind": kind.value, "pages_fetched": pages_fetched},
        )
