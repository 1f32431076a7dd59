"""Configuration loading and updating for the logging system.

The logger is created before the settings file is read, so bootstrap
defaults are used first and config-based levels are applied later via
update_logger_from_config(). The config import is deferred to avoid a
circular dependency between the two packages.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from gpgv_trust.constants import (
    CONFIG_DIR_NAME,
    DEFAULT_CONFIG_SUBDIR,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    LOG_DIR_ENV_VAR,
    LOG_FILE_NAME,
)

if TYPE_CHECKING:
    from gpgv_trust.logger.state import _LoggerState
    from gpgv_trust.types import GlobalConfig


def load_log_settings() -> tuple[str, str, Path]:
    """Load bootstrap console level, file level, and file path.

    Environment Variable Override:
        GPGV_TRUST_LOG_DIR: Overrides the log directory. Test runs use it
        to keep their logs out of the user's config directory.

    Returns:
        Tuple of (console_level, file_level, log_path)

    """
    env_log_dir = os.getenv(LOG_DIR_ENV_VAR)
    if env_log_dir:
        log_path = Path(env_log_dir).expanduser() / LOG_FILE_NAME
    else:
        log_path = (
            Path.home()
            / CONFIG_DIR_NAME
            / DEFAULT_CONFIG_SUBDIR
            / "logs"
            / LOG_FILE_NAME
        )

    return DEFAULT_CONSOLE_LOG_LEVEL, DEFAULT_LOG_LEVEL, log_path


def update_logger_from_config(
    state: "_LoggerState", config: "GlobalConfig | None" = None
) -> None:
    """Update logger handler levels from the settings file.

    Only handler levels change; handlers are never added or removed.
    Errors while loading the settings leave the bootstrap levels in place.

    Args:
        state: Logger state object (from logger.state module)
        config: Already loaded settings; read from settings.conf when
            omitted

    """
    try:
        if config is None:
            from gpgv_trust.config import (  # noqa: PLC0415
                GlobalConfigManager,
            )

            config = GlobalConfigManager().load_global_config()

        console_level = getattr(
            logging, config["console_log_level"], logging.WARNING
        )
        file_level = getattr(logging, config["log_level"], logging.INFO)

        if state.queue_listener is not None:
            for handler in state.queue_listener.handlers:
                if isinstance(handler, RotatingFileHandler):
                    handler.setLevel(file_level)
                elif isinstance(handler, logging.StreamHandler):
                    handler.setLevel(console_level)

        state.config_applied = True

    except (ImportError, KeyError, OSError):
        # Settings not readable yet; keep bootstrap defaults
        pass
