"""
MCP Client Configuration Domain Models.

Defines the caller-supplied configuration for each transport kind.
Each transport has its own value object so that no config carries
fields belonging to another transport.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from urllib.parse import urlparse

from mcpbench.domain.exceptions import ConfigError


class TransportKind(str, Enum):
    """MCP transport kinds a client can be bound to."""

    STDIO = "stdio"  # local subprocess pipe
    SSE = "sse"  # one-way streaming HTTP
    STREAMABLE_HTTP = "streamable_http"  # bidirectional streaming HTTP


@dataclass(frozen=True)
class AuthConfig:
    """Credentials attached to streaming HTTP requests."""

    bearer_token: str = ""

    @property
    def enabled(self) -> bool:
        return bool(self.bearer_token)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "AuthConfig":
        """Create from the caller-visible ``auth`` mapping."""
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ConfigError("auth must be a mapping", field="auth")
        token = data.get("bearer_token") or ""
        if not isinstance(token, str):
            raise ConfigError("auth.bearer_token must be a string", field="auth.bearer_token")
        return cls(bearer_token=token)


@dataclass(frozen=True)
class StdioClientConfig:
    """
    Local subprocess client configuration.

    ``env`` entries are added to the parent environment, not substituted
    for it. With ``debug`` set the server's stderr is forwarded to ours.
    """

    path: str
    args: tuple[str, ...] = ()
    env: Mapping[str, str] = field(default_factory=dict)
    debug: bool = False

    kind = TransportKind.STDIO

    def __post_init__(self) -> None:
        if not isinstance(self.path, str) or not self.path.strip():
            raise ConfigError("path is required for stdio transport", field="path")
        if any(not isinstance(arg, str) for arg in self.args):
            raise ConfigError("args must be strings", field="args")
        for key, value in self.env.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise ConfigError("env keys and values must be strings", field="env")

    @property
    def endpoint(self) -> str:
        """Human readable endpoint for logs and errors."""
        return " ".join([self.path, *self.args])

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "StdioClientConfig":
        """Create from caller-visible keys: path, args, env, debug."""
        if not isinstance(data, Mapping):
            raise ConfigError("config must be a mapping")
        args = data.get("args") or ()
        if isinstance(args, str) or not isinstance(args, (list, tuple)):
            raise ConfigError("args must be a list of strings", field="args")
        env = data.get("env") or {}
        if not isinstance(env, Mapping):
            raise ConfigError("env must be a mapping", field="env")
        debug = data.get("debug", False)
        if not isinstance(debug, bool):
            raise ConfigError("debug must be a boolean", field="debug")
        return cls(
            path=data.get("path") or "",
            args=tuple(args),
            env=dict(env),
            debug=debug,
        )


def _validate_base_url(base_url: Any, kind: TransportKind) -> None:
    if not isinstance(base_url, str) or not base_url:
        raise ConfigError(f"base_url is required for {kind.value} transport", field="base_url")
    parsed = urlparse(base_url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigError(f"base_url must be an http(s) URL, got {base_url!r}", field="base_url")


@dataclass(frozen=True)
class _StreamingClientConfig:
    base_url: str
    auth: AuthConfig = field(default_factory=AuthConfig)

    kind = TransportKind.STREAMABLE_HTTP

    def __post_init__(self) -> None:
        _validate_base_url(self.base_url, self.kind)
        if not isinstance(self.auth, AuthConfig):
            raise ConfigError("auth must be an AuthConfig", field="auth")

    @property
    def endpoint(self) -> str:
        return self.base_url

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]):
        """Create from caller-visible keys: base_url, auth.bearer_token."""
        if not isinstance(data, Mapping):
            raise ConfigError("config must be a mapping")
        return cls(
            base_url=data.get("base_url") or "",
            auth=AuthConfig.from_dict(data.get("auth")),
        )


@dataclass(frozen=True)
class SSEClientConfig(_StreamingClientConfig):
    """One-way streaming (SSE) client configuration. No connect timeout applies."""

    kind = TransportKind.SSE


@dataclass(frozen=True)
class StreamableHTTPClientConfig(_StreamingClientConfig):
    """Bidirectional streaming (Streamable HTTP) client configuration."""

    kind = TransportKind.STREAMABLE_HTTP


ClientConfig = StdioClientConfig | SSEClientConfig | StreamableHTTPClientConfig
