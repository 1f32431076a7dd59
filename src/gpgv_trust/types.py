"""Configuration types for gpgv-trust."""

from typing import TypedDict


class GpgvConfig(TypedDict):
    """Settings for the external verifier."""

    binary: str
    debug: bool


class GlobalConfig(TypedDict):
    """Global application configuration."""

    config_version: str
    log_level: str
    console_log_level: str
    gpgv: GpgvConfig
