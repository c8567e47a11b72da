"""Logging setup for scripts that drive mcpbench clients."""

import logging

from mcpbench.configuration.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Settings | None = None) -> None:
    """Configure root logging from settings.

    The library itself never installs handlers; call this from an
    entry point when plain stderr logging is wanted.
    """
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=LOG_FORMAT,
    )
