"""
List-all request and result value objects.

A list-all call follows every cursor the server hands out and returns
the concatenated items, so its results carry no cursor of their own.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from mcp import types

from mcpbench.domain.exceptions import ConfigError


@dataclass
class ListAllParams:
    """Request metadata sent unchanged with every page request."""

    meta: dict[str, Any] | None = None

    @classmethod
    def from_value(cls, value: "ListAllParams | Mapping[str, Any] | None") -> "ListAllParams":
        """Accept an instance, a mapping with ``meta``/``_meta``, or None."""
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            meta = value.get("meta", value.get("_meta"))
            if meta is not None and not isinstance(meta, Mapping):
                raise ConfigError("meta must be a mapping", field="meta")
            return cls(meta=dict(meta) if meta is not None else None)
        raise ConfigError(f"unsupported list-all params: {type(value).__name__}")


@dataclass
class ListAllToolsResult:
    tools: list[types.Tool] = field(default_factory=list)


@dataclass
class ListAllResourcesResult:
    resources: list[types.Resource] = field(default_factory=list)


@dataclass
class ListAllPromptsResult:
    prompts: list[types.Prompt] = field(default_factory=list)
