"""Tests for logger configuration module."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from pytest import MonkeyPatch

from gpgv_trust.logger import _state, get_logger
from gpgv_trust.logger.config import (
    load_log_settings,
    update_logger_from_config,
)
from gpgv_trust.types import GlobalConfig, GpgvConfig


def test_load_log_settings_with_env_var(monkeypatch: MonkeyPatch) -> None:
    """Test load_log_settings returns test dir when env var is set."""
    test_log_dir = "/tmp/pytest-test-logs"
    monkeypatch.setenv("GPGV_TRUST_LOG_DIR", test_log_dir)

    console_level, file_level, log_path = load_log_settings()

    assert console_level == "WARNING"
    assert file_level == "INFO"
    assert log_path == Path(test_log_dir) / "gpgv-trust.log"


def test_load_log_settings_without_env_var(monkeypatch: MonkeyPatch) -> None:
    """Test load_log_settings returns default path when env var is not set."""
    monkeypatch.delenv("GPGV_TRUST_LOG_DIR", raising=False)

    _, _, log_path = load_log_settings()

    expected_path = (
        Path.home() / ".config" / "gpgv-trust" / "logs" / "gpgv-trust.log"
    )
    assert log_path == expected_path


def test_load_log_settings_with_tilde_in_env_var(
    monkeypatch: MonkeyPatch,
) -> None:
    """Test load_log_settings expands tilde in GPGV_TRUST_LOG_DIR."""
    monkeypatch.setenv("GPGV_TRUST_LOG_DIR", "~/custom-logs")

    _, _, log_path = load_log_settings()

    assert log_path == Path.home() / "custom-logs" / "gpgv-trust.log"
    assert "~" not in str(log_path)


def test_update_logger_from_config_sets_handler_levels() -> None:
    """Test configured levels reach the queue listener's handlers."""
    get_logger(__name__)
    listener = _state.queue_listener
    assert listener is not None
    original = [handler.level for handler in listener.handlers]
    config = GlobalConfig(
        config_version="1.0.0",
        log_level="DEBUG",
        console_log_level="ERROR",
        gpgv=GpgvConfig(binary="gpgv", debug=False),
    )

    try:
        update_logger_from_config(_state, config)

        for handler in listener.handlers:
            if isinstance(handler, RotatingFileHandler):
                assert handler.level == logging.DEBUG
            else:
                assert handler.level == logging.ERROR
        assert _state.config_applied
    finally:
        for handler, level in zip(listener.handlers, original, strict=True):
            handler.setLevel(level)
