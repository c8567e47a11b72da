"""OpenTelemetry configuration and initialization.

This module handles the setup of the OpenTelemetry meter provider
that backs the per-call MCP metrics.
"""

import contextlib
import logging
from collections.abc import Sequence
from typing import Any

from opentelemetry import metrics
from opentelemetry.exporter.otlp.proto.http.metric_exporter import OTLPMetricExporter
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import (
    ConsoleMetricExporter,
    MetricExporter,
    MetricReader,
    PeriodicExportingMetricReader,
)
from opentelemetry.sdk.resources import Resource

from mcpbench.configuration.config import get_settings

logger = logging.getLogger(__name__)

# Global provider (cached after initialization)
_METER_PROVIDER: MeterProvider | None = None
# Flag to control telemetry globally (for testing)
_TELEMETRY_ENABLED: bool | None = None


def _reset_providers() -> None:
    """Reset global providers (for testing)."""
    global _METER_PROVIDER, _TELEMETRY_ENABLED
    _METER_PROVIDER = None
    _TELEMETRY_ENABLED = None


def _create_resource(settings_override: dict[str, Any] | None = None) -> Resource:
    """Create OpenTelemetry Resource with service attributes."""
    settings = settings_override or get_settings().__dict__

    attributes = {
        "service.name": settings.get("service_name", "mcpbench"),
        "deployment.environment": settings.get("environment", "development"),
        "service.namespace": "mcpbench",
    }

    try:
        from importlib.metadata import PackageNotFoundError, version

        attributes["service.version"] = version("mcpbench")
    except PackageNotFoundError:
        attributes["service.version"] = "0.1.0"

    return Resource.create(attributes)


def _create_metric_exporter(settings_override: dict[str, Any] | None = None) -> MetricExporter:
    """Create appropriate metric exporter based on configuration."""
    settings = settings_override or get_settings().__dict__

    endpoint = settings.get("otel_exporter_otlp_endpoint")

    if endpoint:
        if not endpoint.endswith("/v1/metrics"):
            endpoint = f"{endpoint.rstrip('/')}/v1/metrics"
        return OTLPMetricExporter(endpoint=endpoint)

    # Fall back to console exporter for development
    logger.info("No OTLP endpoint configured, using console metric exporter")
    return ConsoleMetricExporter()


def configure_meter_provider(
    settings_override: dict[str, Any] | None = None,
    force_reset: bool = False,
    metric_readers: Sequence[MetricReader] | None = None,
) -> MeterProvider | None:
    """Configure and return the meter provider.

    Args:
        settings_override: Optional settings dict for testing
        force_reset: Force reconfiguration even if already configured
        metric_readers: Readers to attach instead of the exporter-backed
            periodic reader (e.g. an InMemoryMetricReader in tests)

    Returns:
        MeterProvider if telemetry is enabled, None otherwise
    """
    global _METER_PROVIDER, _TELEMETRY_ENABLED

    settings_dict = settings_override or get_settings().__dict__
    enable_telemetry = settings_dict.get("enable_telemetry", True)

    if force_reset:
        shutdown_telemetry()

    # Check module-level flag first
    if _TELEMETRY_ENABLED is False:
        return None

    if not enable_telemetry:
        logger.info("Telemetry is disabled")
        _TELEMETRY_ENABLED = False
        return None

    if _METER_PROVIDER is not None:
        return _METER_PROVIDER

    try:
        resource = _create_resource(settings_override)

        if metric_readers is None:
            exporter = _create_metric_exporter(settings_override)
            interval = settings_dict.get("otel_metric_export_interval", 60000)
            metric_readers = [
                PeriodicExportingMetricReader(exporter, export_interval_millis=interval)
            ]

        provider = MeterProvider(resource=resource, metric_readers=list(metric_readers))

        # The API only accepts the first global provider; later calls log a warning.
        with contextlib.suppress(Exception):
            metrics.set_meter_provider(provider)
        _METER_PROVIDER = provider
        _TELEMETRY_ENABLED = True

        logger.info(
            f"Meter provider configured: service={settings_dict.get('service_name', 'mcpbench')}, "
            f"environment={settings_dict.get('environment', 'development')}"
        )

        return provider

    except Exception as e:
        logger.error(f"Failed to configure meter provider: {e}")
        return None


def get_meter(instrumentation_name: str = "mcpbench") -> metrics.Meter | None:
    """Get a meter for the given instrumentation name.

    Args:
        instrumentation_name: Name of the instrumented module

    Returns:
        Meter instance or None if telemetry is disabled
    """
    provider = configure_meter_provider()
    if provider is None:
        return None

    return provider.get_meter(instrumentation_name)


def shutdown_telemetry() -> None:
    """Shutdown the meter provider, flushing pending metrics."""
    global _METER_PROVIDER, _TELEMETRY_ENABLED

    if _METER_PROVIDER is not None:
        try:
            _METER_PROVIDER.shutdown()
            logger.info("Meter provider shutdown complete")
        except Exception as e:
            logger.error(f"Error shutting down meter provider: {e}")
        finally:
            _METER_PROVIDER = None

    # Reset the enabled flag
    _TELEMETRY_ENABLED = None
