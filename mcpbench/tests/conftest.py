"""Pytest configuration and shared fixtures for testing."""

import pytest

from mcpbench.configuration.config import Settings, get_settings
from mcpbench.infrastructure.mcp.context import CallContext
from mcpbench.tests.fakes import FakeSession, RecordingMetricsSink


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Keep environment-dependent settings from leaking across tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(enable_telemetry=False)


@pytest.fixture
def metrics_sink() -> RecordingMetricsSink:
    return RecordingMetricsSink()


@pytest.fixture
def call_context() -> CallContext:
    return CallContext()


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()
