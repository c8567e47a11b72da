"""
Cancellable call context for MCP client operations.

A CallContext is bound to a client at construction and governs every
call issued through it. Cancelling it interrupts calls in flight and
makes later calls fail immediately.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from mcpbench.domain.exceptions import CallCancelledError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CallContext:
    """
    Lifecycle-scoped cancellation for client calls.

    Calls register the task running them; ``cancel()`` cancels those
    tasks and the resulting ``asyncio.CancelledError`` is turned into
    ``CallCancelledError`` for the caller. Cancellation coming from
    anywhere else propagates untouched.

    ``cancel()`` must be called from the event loop thread.
    """

    def __init__(self) -> None:
        self._cancelled = False
        self._reason: str | None = None
        self._tasks: set[asyncio.Task] = set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def reason(self) -> str | None:
        return self._reason

    def cancel(self, reason: str | None = None) -> None:
        """Cancel the context. Idempotent."""
        if self._cancelled:
            return
        self._cancelled = True
        self._reason = reason
        try:
            current = asyncio.current_task()
        except RuntimeError:
            current = None
        # The calling task is running, not suspended in a call; it sees the
        # flag at its next raise_if_cancelled/run.
        pending = [task for task in self._tasks if task is not current and not task.done()]
        logger.debug(f"Call context cancelled ({reason or 'no reason'}), interrupting {len(pending)} call(s)")
        for task in pending:
            task.cancel()

    def raise_if_cancelled(self, operation: str = "call") -> None:
        """Raise CallCancelledError if the context is cancelled."""
        if self._cancelled:
            raise CallCancelledError(operation, self._reason)

    async def run(self, call: Callable[[], Awaitable[T]], operation: str = "call") -> T:
        """
        Run ``call`` under this context.

        Args:
            call: Zero-argument callable producing the awaitable to run.
            operation: Operation name used in the cancellation error.

        Returns:
            Whatever the awaitable returns.

        Raises:
            CallCancelledError: If the context is, or becomes, cancelled.
        """
        self.raise_if_cancelled(operation)

        task = asyncio.current_task()
        if task is not None:
            self._tasks.add(task)
        try:
            return await call()
        except asyncio.CancelledError:
            # Only absorb the cancellation we requested ourselves.
            if self._cancelled and task is not None and task.cancelling() > 0:
                if task.uncancel() == 0:
                    raise CallCancelledError(operation, self._reason) from None
            raise
        finally:
            if task is not None:
                self._tasks.discard(task)
