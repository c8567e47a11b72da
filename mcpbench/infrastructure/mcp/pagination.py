"""
Cursor-following aggregation for MCP list operations.

Pages are fetched strictly one after another: the next cursor is only
known once the current page has arrived. Items keep the server's
order within and across pages; null entries are skipped.
"""

import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from mcpbench.domain.exceptions import (
    AggregationError,
    AggregationErrorKind,
    CallCancelledError,
    RemoteCallError,
)
from mcpbench.infrastructure.mcp.context import CallContext

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """One page of a paginated listing. An empty or missing cursor ends the listing."""

    items: Sequence[T | None]
    next_cursor: str | None = None


PageFetcher = Callable[[str], Awaitable[Page[T]]]


class PaginationAggregator:
    """
    Follows server-issued cursors until the listing is complete.

    By default there is no page cap, so a server that never stops
    returning cursors keeps the loop going. ``max_pages`` and
    ``detect_cursor_cycles`` bound that when configured.
    """

    def __init__(
        self,
        context: CallContext,
        max_pages: int | None = None,
        detect_cursor_cycles: bool = False,
    ) -> None:
        if max_pages is not None and max_pages < 1:
            raise ValueError("max_pages must be at least 1")
        self._context = context
        self.max_pages = max_pages
        self.detect_cursor_cycles = detect_cursor_cycles

    async def aggregate(self, fetch_page: PageFetcher[T], operation: str = "ListAll") -> list[T]:
        """
        Fetch every page and concatenate the non-null items.

        Args:
            fetch_page: Called with the cursor to request; the empty
                string means "first page, send no cursor".
            operation: Operation name used in errors and logs.

        Returns:
            All items in server order.

        Raises:
            AggregationError: On the first failing page, on cancellation
                of the call context, or when a configured bound trips.
                Items collected so far are discarded.
        """
        items: list[T] = []
        seen_cursors: set[str] = set()
        cursor = ""
        pages = 0

        while True:
            if self.max_pages is not None and pages >= self.max_pages:
                raise AggregationError(
                    AggregationErrorKind.PAGE_LIMIT,
                    f"{operation}: server still paginating after {pages} pages",
                    pages_fetched=pages,
                )

            try:
                self._context.raise_if_cancelled(operation)
                page = await self._context.run(lambda: fetch_page(cursor), operation)
            except CallCancelledError as e:
                raise AggregationError(
                    AggregationErrorKind.CANCELLED,
                    f"{operation}: cancelled after {pages} pages",
                    pages_fetched=pages,
                    original_error=e,
                ) from e
            except Exception as e:
                error = e if isinstance(e, RemoteCallError) else RemoteCallError(operation, original_error=e)
                raise AggregationError(
                    AggregationErrorKind.PAGE_FAILED,
                    f"{operation}: page {pages + 1} failed",
                    pages_fetched=pages,
                    original_error=error,
                ) from error

            pages += 1
            items.extend(item for item in page.items if item is not None)

            next_cursor = page.next_cursor or ""
            logger.debug(
                f"{operation}: page {pages} returned {len(page.items)} items, "
                f"next cursor {'<none>' if not next_cursor else repr(next_cursor)}"
            )
            if not next_cursor:
                return items

            if self.detect_cursor_cycles:
                if next_cursor in seen_cursors:
                    raise AggregationError(
                        AggregationErrorKind.CURSOR_CYCLE,
                        f"{operation}: server repeated cursor {next_cursor!r}",
                        pages_fetched=pages,
                    )
                seen_cursors.add(next_cursor)

            cursor = next_cursor
