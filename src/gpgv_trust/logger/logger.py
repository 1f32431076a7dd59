"""Public logging entry points.

- get_logger(): module loggers under the gpgv_trust root
- setup_logging(): explicit root initialization with chosen levels
- set_console_level(): raise or lower stderr verbosity at runtime
- flush_all_handlers(): write out every queued record
"""

import atexit
import contextlib
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from gpgv_trust.constants import LOG_ROOT_NAME
from gpgv_trust.logger.config import load_log_settings
from gpgv_trust.logger.handlers import setup_root_logger
from gpgv_trust.logger.state import get_state


def flush_all_handlers() -> None:
    """Write every queued record, then flush each handler.

    The listener is stopped, which drains the queue up to its sentinel,
    and started again.
    """
    state = get_state()
    listener = state.queue_listener
    if listener is None:
        return

    listener.stop()
    listener.start()
    for handler in listener.handlers:
        with contextlib.suppress(OSError, ValueError):
            handler.flush()


def _stop_listener() -> None:
    """Drain the queue and stop the listener thread if it is running."""
    state = get_state()
    if state.queue_listener is None:
        return
    state.queue_listener.stop()
    state.queue_listener = None


atexit.register(_stop_listener)


def setup_logging(
    name: str = LOG_ROOT_NAME,
    console_level: str | None = None,
    file_level: str | None = None,
    log_file: Path | None = None,
    enable_file_logging: bool = True,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Return logger ``name``, initializing the root logger on first use.

    Levels and path not given explicitly come from load_log_settings();
    later calls ignore them since the root is configured only once.

    Args:
        name: Logger name, typically __name__
        console_level: stderr level ("DEBUG", "INFO", "WARNING")
        file_level: Log file level ("DEBUG", "INFO")
        log_file: Log file path
        enable_file_logging: Whether to write the log file

    Raises:
        ConfigurationError: If the log file cannot be opened

    """
    state = get_state()
    with state.lock:
        if not state.root_initialized:
            default_console, default_file, default_path = load_log_settings()
            setup_root_logger(
                state,
                console_level or default_console,
                file_level or default_file,
                log_file or default_path,
                enable_file_logging,
            )
    return logging.getLogger(name)


def get_logger(
    name: str = LOG_ROOT_NAME,
    enable_file_logging: bool = True,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Get a module logger.

    Example:
        >>> from gpgv_trust.logger import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("Read: %s", line)

    """
    return setup_logging(name=name, enable_file_logging=enable_file_logging)


def set_console_level(level: str) -> None:
    """Change the level of the stderr handler.

    Used by ``--debug`` so status line traces reach the terminal; the
    log file keeps its configured level.

    Args:
        level: Level name such as "DEBUG" or "WARNING"

    """
    state = get_state()
    if state.queue_listener is None:
        return
    numeric = getattr(logging, level.upper(), logging.WARNING)
    for handler in state.queue_listener.handlers:
        if not isinstance(handler, RotatingFileHandler):
            handler.setLevel(numeric)
