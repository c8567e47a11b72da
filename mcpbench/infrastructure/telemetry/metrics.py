"""OpenTelemetry metrics utilities.

This module provides functions for creating metric instruments
using the OpenTelemetry Metrics API.
"""

from opentelemetry import metrics
from opentelemetry.metrics import Counter, Histogram

from mcpbench.infrastructure.telemetry.config import get_meter as _get_meter


def get_meter(instrumentation_name: str = "mcpbench") -> metrics.Meter | None:
    """Get a meter for the given instrumentation name.

    Args:
        instrumentation_name: Name of the instrumented module

    Returns:
        Meter instance or None if telemetry is disabled
    """
    return _get_meter(instrumentation_name)


def create_counter(
    name: str,
    description: str,
    unit: str = "",
    meter: metrics.Meter | None = None,
) -> Counter | None:
    """Create a counter metric.

    Args:
        name: Metric name
        description: Metric description
        unit: Metric unit (e.g., "requests")
        meter: Meter to use instead of the global one

    Returns:
        Counter instance or None if telemetry is disabled
    """
    meter = meter or get_meter()
    if meter is None:
        return None

    return meter.create_counter(name=name, description=description, unit=unit)


def create_histogram(
    name: str,
    description: str,
    unit: str = "",
    meter: metrics.Meter | None = None,
) -> Histogram | None:
    """Create a histogram metric.

    Args:
        name: Metric name
        description: Metric description
        unit: Metric unit (e.g., "ms", "s")
        meter: Meter to use instead of the global one

    Returns:
        Histogram instance or None if telemetry is disabled
    """
    meter = meter or get_meter()
    if meter is None:
        return None

    return meter.create_histogram(name=name, description=description, unit=unit)
