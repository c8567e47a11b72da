"""
Bearer token credentials for streaming HTTP clients.
"""

import logging
from collections.abc import Generator

import httpx

from mcpbench.domain.model.mcp.client_config import AuthConfig

logger = logging.getLogger(__name__)


class BearerTokenAuth(httpx.Auth):
    """Attaches a static ``Authorization: Bearer <token>`` header to every request."""

    def __init__(self, token: str) -> None:
        self._header = f"Bearer {token}"

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = self._header
        yield request


def decorate_client(client: httpx.AsyncClient, auth: AuthConfig) -> httpx.AsyncClient:
    """
    Install bearer credentials on ``client`` when a token is configured.

    The same client object is returned, so its transport, proxy mounts,
    TLS and dial settings are kept. Without a token the client is
    returned untouched.
    """
    if not auth.enabled:
        return client

    client.auth = BearerTokenAuth(auth.bearer_token)
    logger.debug("Bearer token authentication enabled for MCP HTTP client")
    return client
