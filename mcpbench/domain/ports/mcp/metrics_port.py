"""
MetricsSinkPort - Abstract interface for per-call observations.

One sink instance is typically shared by every client in a run, so
``push`` may be called concurrently and must record each observation
as a single unit.
"""

from abc import abstractmethod
from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsSinkPort(Protocol):
    """Accepts one (operation, duration, error) observation per logical call."""

    @abstractmethod
    def push(self, operation: str, duration: float, error: BaseException | None = None) -> None:
        """
        Record one observation.

        Args:
            operation: Operation name, e.g. "CallTool" or "ListAllTools".
            duration: Wall-clock duration in seconds.
            error: The failure, or None when the call succeeded.
        """
        ...
