"""OpenTelemetry integration for mcpbench.

This module provides the meter provider setup and the metrics sinks
that record one observation per MCP client call.
"""

from mcpbench.infrastructure.telemetry.config import (
    configure_meter_provider,
    get_meter,
    shutdown_telemetry,
)
from mcpbench.infrastructure.telemetry.metrics import create_counter, create_histogram
from mcpbench.infrastructure.telemetry.sink import (
    NullMetricsSink,
    OpenTelemetryMetricsSink,
    create_metrics_sink,
)

__all__ = [
    # Config
    "configure_meter_provider",
    "get_meter",
    "shutdown_telemetry",
    # Metrics
    "create_counter",
    "create_histogram",
    # Sinks
    "OpenTelemetryMetricsSink",
    "NullMetricsSink",
    "create_metrics_sink",
]
