"""
Host environment consumed by client construction.

The embedding run (a load-test driver, a test harness) owns these
settings and shares them across every client it builds: TLS material,
the connection-reuse policy, dial settings, the call context and the
metrics sink.
"""

import ssl
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from mcpbench.domain.ports.mcp import MetricsSinkPort
from mcpbench.infrastructure.mcp.context import CallContext
from mcpbench.infrastructure.telemetry.sink import NullMetricsSink


@dataclass(frozen=True)
class TLSConfig:
    """
    Run-wide TLS settings.

    ``to_ssl_context()`` builds a fresh context each time, which is how
    each streaming client gets its own copy with ALPN pinned to HTTP/1.1.
    """

    verify: bool = True
    ca_file: str | None = None
    cert_file: str | None = None
    key_file: str | None = None
    minimum_version: ssl.TLSVersion | None = None
    maximum_version: ssl.TLSVersion | None = None
    ciphers: str | None = None

    def to_ssl_context(self, alpn_protocols: Sequence[str] = ("http/1.1",)) -> ssl.SSLContext:
        context = ssl.create_default_context(cafile=self.ca_file)
        if not self.verify:
            context.check_hostname = False
            context.verify_mode = ssl.CERT_NONE
        if self.cert_file:
            context.load_cert_chain(self.cert_file, self.key_file)
        if self.minimum_version is not None:
            context.minimum_version = self.minimum_version
        if self.maximum_version is not None:
            context.maximum_version = self.maximum_version
        if self.ciphers:
            context.set_ciphers(self.ciphers)
        context.set_alpn_protocols(list(alpn_protocols))
        return context


@dataclass(frozen=True)
class Dialer:
    """Socket-level dial settings applied to streaming HTTP connection pools."""

    local_address: str | None = None
    socket_options: Sequence[tuple[Any, ...]] | None = None
    uds: str | None = None


@dataclass
class HostEnvironment:
    """Everything a run shares with the clients it constructs."""

    tls: TLSConfig | None = None
    no_connection_reuse: bool = False
    dialer: Dialer | None = None
    context: CallContext = field(default_factory=CallContext)
    metrics: MetricsSinkPort = field(default_factory=NullMetricsSink)
