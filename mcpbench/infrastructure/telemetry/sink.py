"""Metrics sinks for MCP call observations.

Every logical client call becomes one observation: a duration sample,
a request count and, on failure, an error count, all tagged with the
operation name and the run's tags.
"""

import logging
from collections.abc import Mapping

from opentelemetry import metrics

from mcpbench.infrastructure.telemetry.metrics import create_counter, create_histogram
from mcpbench.infrastructure.telemetry.metrics import get_meter as _get_meter

logger = logging.getLogger(__name__)

REQUEST_DURATION = "mcp_request_duration"
REQUEST_COUNT = "mcp_requests"
REQUEST_ERRORS = "mcp_request_errors"


class OpenTelemetryMetricsSink:
    """MetricsSinkPort backed by OpenTelemetry instruments.

    Instruments are thread-safe, so one sink can be shared by every
    client in a run.
    """

    def __init__(self, meter: metrics.Meter, tags: Mapping[str, str] | None = None) -> None:
        self._tags = dict(tags or {})
        self._duration = create_histogram(
            REQUEST_DURATION,
            "Duration of MCP client requests",
            unit="ms",
            meter=meter,
        )
        self._requests = create_counter(
            REQUEST_COUNT,
            "Number of MCP client requests",
            unit="requests",
            meter=meter,
        )
        self._errors = create_counter(
            REQUEST_ERRORS,
            "Number of failed MCP client requests",
            unit="requests",
            meter=meter,
        )

    @property
    def tags(self) -> dict[str, str]:
        return dict(self._tags)

    def push(self, operation: str, duration: float, error: BaseException | None = None) -> None:
        attributes = {
            **self._tags,
            "method": operation,
            "status": "error" if error is not None else "ok",
        }
        self._duration.record(duration * 1000.0, attributes)
        self._requests.add(1, attributes)
        if error is not None:
            self._errors.add(1, {**attributes, "error_type": type(error).__name__})


class NullMetricsSink:
    """Discards observations. Used when telemetry is disabled."""

    def push(self, operation: str, duration: float, error: BaseException | None = None) -> None:
        logger.debug(f"Dropping metric for {operation} ({duration:.3f}s, error={error!r})")


def create_metrics_sink(
    tags: Mapping[str, str] | None = None,
    meter: metrics.Meter | None = None,
) -> OpenTelemetryMetricsSink | NullMetricsSink:
    """Build the sink for a run, falling back to a null sink without telemetry."""
    meter = meter or _get_meter()
    if meter is None:
        return NullMetricsSink()
    return OpenTelemetryMetricsSink(meter, tags)
