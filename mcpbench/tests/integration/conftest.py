"""Integration test configuration."""

import pytest

PROXY_VARS = (
    "HTTP_PROXY",
    "HTTPS_PROXY",
    "ALL_PROXY",
    "http_proxy",
    "https_proxy",
    "all_proxy",
)


@pytest.fixture(autouse=True)
def _direct_connections(monkeypatch):
    """Keep local test traffic away from any proxy configured in the environment."""
    for name in PROXY_VARS:
        monkeypatch.delenv(name, raising=False)
