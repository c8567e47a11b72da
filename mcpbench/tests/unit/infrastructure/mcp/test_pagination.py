"""Unit tests for PaginationAggregator."""

import pytest

from mcpbench.domain.exceptions import (
    AggregationError,
    AggregationErrorKind,
    RemoteCallError,
)
from mcpbench.infrastructure.mcp.context import CallContext
from mcpbench.infrastructure.mcp.pagination import Page, PaginationAggregator


class ScriptedPages:
    """Page fetcher replaying a cursor -> page script and recording requests."""

    def __init__(self, script):
        self.script = script
        self.cursors: list[str] = []

    async def __call__(self, cursor: str) -> Page:
        self.cursors.append(cursor)
        page = self.script[cursor]
        if isinstance(page, Exception):
            raise page
        return page


@pytest.mark.unit
class TestPaginationAggregator:
    @pytest.fixture
    def aggregator(self, call_context):
        return PaginationAggregator(call_context)

    async def test_single_page(self, aggregator):
        fetch = ScriptedPages({"": Page(["a", "b"], None)})

        assert await aggregator.aggregate(fetch) == ["a", "b"]
        assert fetch.cursors == [""]

    async def test_follows_cursors_in_order(self, aggregator):
        fetch = ScriptedPages(
            {
                "": Page(["a", "b"], "C1"),
                "C1": Page(["c"], "C2"),
                "C2": Page(["d", "e"], ""),
            }
        )

        assert await aggregator.aggregate(fetch) == ["a", "b", "c", "d", "e"]
        assert fetch.cursors == ["", "C1", "C2"]

    async def test_empty_listing(self, aggregator):
        fetch = ScriptedPages({"": Page([], None)})

        assert await aggregator.aggregate(fetch) == []

    async def test_empty_middle_page_keeps_going(self, aggregator):
        fetch = ScriptedPages({"": Page(["a"], "C1"), "C1": Page([], "C2"), "C2": Page(["b"], None)})

        assert await aggregator.aggregate(fetch) == ["a", "b"]

    async def test_null_items_skipped(self, aggregator):
        fetch = ScriptedPages({"": Page(["a", None], "C1"), "C1": Page([None, "b"], None)})

        assert await aggregator.aggregate(fetch) == ["a", "b"]

    async def test_page_failure_discards_collected_items(self, aggregator):
        cause = ConnectionResetError("reset")
        fetch = ScriptedPages({"": Page(["a", "b"], "C1"), "C1": cause})

        with pytest.raises(AggregationError) as exc_info:
            await aggregator.aggregate(fetch, "ListAllTools")

        error = exc_info.value
        assert error.kind is AggregationErrorKind.PAGE_FAILED
        assert error.pages_fetched == 1
        assert isinstance(error.original_error, RemoteCallError)
        assert error.original_error.original_error is cause
        assert error.original_error.operation == "ListAllTools"

    async def test_remote_call_error_not_rewrapped(self, aggregator):
        cause = RemoteCallError("ListAllTools", message="server said no")
        fetch = ScriptedPages({"": cause})

        with pytest.raises(AggregationError) as exc_info:
            await aggregator.aggregate(fetch)

        assert exc_info.value.original_error is cause

    async def test_no_cap_by_default(self, aggregator):
        script = {"": Page([0], "1")}
        for i in range(1, 50):
            script[str(i)] = Page([i], str(i + 1))
        script["50"] = Page([50], None)

        assert await aggregator.aggregate(ScriptedPages(script)) == list(range(51))

    async def test_page_limit(self, call_context):
        aggregator = PaginationAggregator(call_context, max_pages=2)
        fetch = ScriptedPages({"": Page(["a"], "C1"), "C1": Page(["b"], "C2"), "C2": Page(["c"], None)})

        with pytest.raises(AggregationError) as exc_info:
            await aggregator.aggregate(fetch)

        assert exc_info.value.kind is AggregationErrorKind.PAGE_LIMIT
        assert exc_info.value.pages_fetched == 2
        assert fetch.cursors == ["", "C1"]

    async def test_page_limit_not_hit_when_listing_ends(self, call_context):
        aggregator = PaginationAggregator(call_context, max_pages=2)
        fetch = ScriptedPages({"": Page(["a"], "C1"), "C1": Page(["b"], None)})

        assert await aggregator.aggregate(fetch) == ["a", "b"]

    def test_max_pages_must_be_positive(self, call_context):
        with pytest.raises(ValueError):
            PaginationAggregator(call_context, max_pages=0)

    async def test_cursor_cycle_detected(self, call_context):
        aggregator = PaginationAggregator(call_context, detect_cursor_cycles=True)
        fetch = ScriptedPages({"": Page(["a"], "C1"), "C1": Page(["b"], "C2"), "C2": Page(["c"], "C1")})

        with pytest.raises(AggregationError) as exc_info:
            await aggregator.aggregate(fetch)

        assert exc_info.value.kind is AggregationErrorKind.CURSOR_CYCLE
        assert fetch.cursors == ["", "C1", "C2"]

    async def test_repeated_cursor_followed_without_detection(self, call_context):
        aggregator = PaginationAggregator(call_context, max_pages=5)
        fetch = ScriptedPages({"": Page(["a"], "C1"), "C1": Page(["b"], "C1")})

        with pytest.raises(AggregationError) as exc_info:
            await aggregator.aggregate(fetch)

        assert exc_info.value.kind is AggregationErrorKind.PAGE_LIMIT
        assert fetch.cursors == ["", "C1", "C1", "C1", "C1"]


@pytest.mark.unit
class TestPaginationCancellation:
    async def test_cancelled_before_start(self):
        context = CallContext()
        context.cancel("stop")
        fetch = ScriptedPages({"": Page(["a"], None)})

        with pytest.raises(AggregationError) as exc_info:
            await PaginationAggregator(context).aggregate(fetch)

        assert exc_info.value.kind is AggregationErrorKind.CANCELLED
        assert exc_info.value.pages_fetched == 0
        assert fetch.cursors == []

    async def test_cancel_between_pages_stops_requests(self):
        context = CallContext()
        script = {"": Page(["a"], "C1"), "C1": Page(["b"], None)}
        cursors: list[str] = []

        async def fetch(cursor: str) -> Page:
            cursors.append(cursor)
            page = script[cursor]
            if cursor == "":
                context.cancel("run stopped")
            return page

        with pytest.raises(AggregationError) as exc_info:
            await PaginationAggregator(context).aggregate(fetch)

        assert exc_info.value.kind is AggregationErrorKind.CANCELLED
        assert exc_info.value.pages_fetched == 1
        assert cursors == [""]
