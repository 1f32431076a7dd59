"""Logging utilities for gpgv-trust.

Architecture:
    Application → QueueHandler → Queue → QueueListener Thread
                                              ↓
                                    Console + File Handlers

Usage:
    >>> from gpgv_trust.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Verifying %s", path)  # Use %-style formatting

Environment Variables:
    GPGV_TRUST_LOG_DIR: Override the log directory (used by tests)

Rules:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Handlers are ONLY attached to the root 'gpgv_trust' logger
    4. Never use f-strings in log calls
"""

from typing import TYPE_CHECKING

from gpgv_trust.logger.config import (
    update_logger_from_config as _update_config,
)
from gpgv_trust.logger.formatters import AptConsoleFormatter
from gpgv_trust.logger.handlers import ConfigurationError
from gpgv_trust.logger.logger import (
    flush_all_handlers,
    get_logger,
    set_console_level,
    setup_logging,
)
from gpgv_trust.logger.state import _state, get_state

if TYPE_CHECKING:
    from gpgv_trust.types import GlobalConfig

__all__ = [
    "AptConsoleFormatter",
    "ConfigurationError",
    "_state",  # For testing only
    "flush_all_handlers",
    "get_logger",
    "set_console_level",
    "setup_logging",
    "update_logger_from_config",
]


def update_logger_from_config(config: "GlobalConfig | None" = None) -> None:
    """Apply log levels from settings.conf to the running handlers."""
    _update_config(get_state(), config)
