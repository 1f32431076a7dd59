"""Handler wiring for the gpgv_trust root logger.

Records are queued by a QueueHandler and written by a QueueListener
thread, so reading the verifier's status pipe never waits on log I/O.
Console records go to stderr; stdout is reserved for verdict output.
"""

import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from gpgv_trust.constants import (
    LOG_BACKUP_COUNT,
    LOG_FILE_DATE_FORMAT,
    LOG_FILE_FORMAT,
    LOG_ROOT_NAME,
    LOG_ROTATION_THRESHOLD_BYTES,
)
from gpgv_trust.exceptions import GpgvTrustError
from gpgv_trust.logger.formatters import AptConsoleFormatter

if TYPE_CHECKING:
    from gpgv_trust.logger.state import _LoggerState


class ConfigurationError(GpgvTrustError):
    """Error in logging configuration."""

    error_prefix = "Logging setup failed"


class StderrHandler(logging.StreamHandler):
    """Stream handler bound to whatever ``sys.stderr`` is at emit time."""

    def __init__(self) -> None:
        logging.Handler.__init__(self)

    @property
    def stream(self):
        return sys.stderr


def _level(name: str, fallback: int) -> int:
    """Resolve a level name such as "DEBUG" to its number."""
    return getattr(logging, name.upper(), fallback)


def _console_handler(console_level: str) -> StderrHandler:
    """Build the stderr handler."""
    handler = StderrHandler()
    handler.setFormatter(AptConsoleFormatter(use_color=sys.stderr.isatty()))
    handler.setLevel(_level(console_level, logging.WARNING))
    return handler


def _file_handler(log_file: Path, file_level: str) -> RotatingFileHandler:
    """Build the rotating log file handler.

    Raises:
        ConfigurationError: If the log directory or file cannot be opened

    """
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            filename=str(log_file),
            maxBytes=LOG_ROTATION_THRESHOLD_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError as e:
        msg = f"Cannot open log file {log_file}: {e}"
        raise ConfigurationError(msg) from e

    handler.setFormatter(
        logging.Formatter(LOG_FILE_FORMAT, datefmt=LOG_FILE_DATE_FORMAT)
    )
    handler.setLevel(_level(file_level, logging.INFO))
    return handler


def setup_root_logger(
    state: "_LoggerState",
    console_level: str,
    file_level: str,
    log_file: Path,
    enable_file_logging: bool,  # noqa: FBT001
) -> None:
    """Attach the queue handler to the root logger and start the listener.

    Args:
        state: Shared logger state (see logger.state)
        console_level: Minimum level shown on stderr
        file_level: Minimum level written to the log file
        log_file: Rotating log file path
        enable_file_logging: Whether to write the log file at all

    Raises:
        ConfigurationError: If the log file cannot be opened

    """
    handlers: list[logging.Handler] = [_console_handler(console_level)]
    if enable_file_logging:
        handlers.append(_file_handler(log_file, file_level))

    root = logging.getLogger(LOG_ROOT_NAME)
    for old in root.handlers[:]:
        root.removeHandler(old)
        old.close()
    # Levels are enforced per handler
    root.setLevel(logging.DEBUG)
    root.propagate = False

    state.log_queue = queue.Queue(-1)
    state.queue_listener = QueueListener(
        state.log_queue, *handlers, respect_handler_level=True
    )
    state.queue_listener.start()
    root.addHandler(QueueHandler(state.log_queue))
    state.root_initialized = True
