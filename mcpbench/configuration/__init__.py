"""Configuration for mcpbench."""

from mcpbench.configuration.config import Settings, get_settings
from mcpbench.configuration.logging_config import LOG_FORMAT, configure_logging

__all__ = ["Settings", "get_settings", "configure_logging", "LOG_FORMAT"]
