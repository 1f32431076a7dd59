"""Configuration management - settings file and path utilities.

This package provides:
- GlobalConfigManager: INI configuration management (from settings.py)
- Paths: Path constants and utilities (from paths.py)
- ConfigCommentManager: commented settings file layout (from parser.py)
"""

from gpgv_trust.config.parser import ConfigCommentManager
from gpgv_trust.config.paths import Paths
from gpgv_trust.config.settings import GlobalConfigManager
from gpgv_trust.types import GlobalConfig, GpgvConfig

__all__ = [
    "ConfigCommentManager",
    "GlobalConfig",
    "GlobalConfigManager",
    "GpgvConfig",
    "Paths",
]
