"""
HTTP client construction for streaming MCP transports.

Builds the httpx client each SSE or Streamable HTTP transport owns,
applying the host's TLS, connection-reuse and dial settings plus the
process environment's proxy configuration.
"""

import logging
import urllib.request

import httpx

from mcpbench.configuration.config import Settings
from mcpbench.domain.model.mcp.client_config import AuthConfig
from mcpbench.infrastructure.mcp.auth import decorate_client
from mcpbench.infrastructure.mcp.host import HostEnvironment

logger = logging.getLogger(__name__)


def _transport_options(host: HostEnvironment) -> dict:
    """Keyword arguments shared by the direct and proxied transports."""
    options: dict = {"http1": True, "http2": False}

    if host.tls is not None:
        options["verify"] = host.tls.to_ssl_context()

    if host.no_connection_reuse:
        options["limits"] = httpx.Limits(max_keepalive_connections=0)

    if host.dialer is not None:
        if host.dialer.local_address is not None:
            options["local_address"] = host.dialer.local_address
        if host.dialer.socket_options is not None:
            options["socket_options"] = list(host.dialer.socket_options)
        if host.dialer.uds is not None:
            options["uds"] = host.dialer.uds

    return options


def environment_proxy_mounts(host: HostEnvironment) -> dict[str, httpx.AsyncHTTPTransport | None]:
    """
    Translate HTTP_PROXY / HTTPS_PROXY / ALL_PROXY / NO_PROXY into httpx mounts.

    A ``None`` mount routes matching requests to the client's direct
    transport, which is how NO_PROXY hosts bypass the proxy.
    """
    proxies = urllib.request.getproxies()
    mounts: dict[str, httpx.AsyncHTTPTransport | None] = {}

    for scheme in ("http", "https", "all"):
        proxy_url = proxies.get(scheme)
        if not proxy_url:
            continue
        if "://" not in proxy_url:
            proxy_url = f"http://{proxy_url}"
        mounts[f"{scheme}://"] = httpx.AsyncHTTPTransport(proxy=proxy_url, **_transport_options(host))

    if not mounts:
        return mounts

    for hostname in proxies.get("no", "").split(","):
        hostname = hostname.strip()
        if not hostname:
            continue
        if hostname == "*":
            return {}
        if hostname.startswith("."):
            mounts[f"all://*{hostname}"] = None
        else:
            mounts[f"all://{hostname}"] = None
            mounts[f"all://*.{hostname}"] = None

    return mounts


def build_http_client(
    host: HostEnvironment,
    auth: AuthConfig,
    settings: Settings,
) -> httpx.AsyncClient:
    """
    Create the httpx client for one streaming transport.

    Args:
        host: Run-wide TLS, reuse and dial settings.
        auth: Optional bearer credentials.
        settings: Timeouts for requests and streaming reads.

    Returns:
        An unopened AsyncClient, exclusively owned by the caller.
    """
    client = httpx.AsyncClient(
        transport=httpx.AsyncHTTPTransport(**_transport_options(host)),
        mounts=environment_proxy_mounts(host),
        timeout=httpx.Timeout(settings.mcp_http_timeout, read=settings.mcp_sse_read_timeout),
        follow_redirects=True,
    )
    logger.debug(
        f"Built MCP HTTP client (tls={'custom' if host.tls else 'default'}, "
        f"reuse={'off' if host.no_connection_reuse else 'on'}, dialer={host.dialer is not None})"
    )
    return decorate_client(client, auth)
