"""Global configuration manager for INI settings."""

import configparser
import logging
from pathlib import Path

from gpgv_trust.config.parser import (
    ConfigCommentManager,
    _strip_inline_comment,
)
from gpgv_trust.config.paths import Paths
from gpgv_trust.constants import (
    CONFIG_FILE_NAME,
    CONFIG_VERSION,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_DEBUG,
    DEFAULT_GPGV_BINARY,
    DEFAULT_LOG_LEVEL,
    KEY_BINARY,
    KEY_CONFIG_VERSION,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_DEBUG,
    KEY_LOG_LEVEL,
    SECTION_DEFAULT,
    SECTION_GPGV,
)
from gpgv_trust.types import GlobalConfig, GpgvConfig

logger = logging.getLogger(__name__)

# Type alias for raw INI config dictionary
RawConfigDict = dict[str, str | dict[str, str]]


class GlobalConfigManager:
    """Manages global INI configuration."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize global config manager.

        Args:
            config_dir: Configuration directory path
                (defaults to Paths.CONFIG_DIR)

        """
        self.config_dir = config_dir or Paths.CONFIG_DIR
        self.settings_file = self.config_dir / CONFIG_FILE_NAME

    def get_default_global_config(self) -> RawConfigDict:
        """Get default global configuration values."""
        return {
            KEY_CONFIG_VERSION: CONFIG_VERSION,
            KEY_LOG_LEVEL: DEFAULT_LOG_LEVEL,
            KEY_CONSOLE_LOG_LEVEL: DEFAULT_CONSOLE_LOG_LEVEL,
            SECTION_GPGV: {
                KEY_BINARY: DEFAULT_GPGV_BINARY,
                KEY_DEBUG: str(DEFAULT_DEBUG).lower(),
            },
        }

    def _create_config_from_defaults(
        self, defaults: RawConfigDict
    ) -> configparser.ConfigParser:
        """Create ConfigParser populated with the defaults dictionary."""
        config = configparser.ConfigParser(
            inline_comment_prefixes=("#", ";"),
            interpolation=None,
        )

        flat_defaults = {
            key: str(value)
            for key, value in defaults.items()
            if not isinstance(value, dict)
        }
        config.read_dict({SECTION_DEFAULT: flat_defaults})

        for key, value in defaults.items():
            if isinstance(value, dict):
                config.add_section(key)
                for subkey, subvalue in value.items():
                    config.set(key, subkey, str(subvalue))

        return config

    def load_global_config(self) -> GlobalConfig:
        """Load global configuration from INI file.

        A missing settings file is created from the commented defaults;
        an unparsable one is ignored in favour of the defaults.

        Returns:
            Loaded global configuration

        """
        defaults = self.get_default_global_config()
        config = self._create_config_from_defaults(defaults)

        if self.settings_file.exists():
            try:
                config.read(self.settings_file, encoding="utf-8")
            except configparser.Error as e:
                logger.warning(
                    "Could not parse %s, using defaults: %s",
                    self.settings_file,
                    e,
                )
                config = self._create_config_from_defaults(defaults)
        else:
            self.save_global_config(self._convert_to_global_config(config))

        return self._convert_to_global_config(config)

    def save_global_config(self, config: GlobalConfig) -> None:
        """Save global configuration to INI file with comments.

        Args:
            config: Global configuration to save

        """
        comment_manager = ConfigCommentManager()
        section_comments = comment_manager.get_section_comments()
        key_comments = comment_manager.get_key_comments()

        sections: dict[str, dict[str, str]] = {
            SECTION_DEFAULT: {
                KEY_CONFIG_VERSION: config["config_version"],
                KEY_LOG_LEVEL: config["log_level"],
                KEY_CONSOLE_LOG_LEVEL: config["console_log_level"],
            },
            SECTION_GPGV: {
                KEY_BINARY: config["gpgv"]["binary"],
                KEY_DEBUG: str(config["gpgv"]["debug"]).lower(),
            },
        }

        self.config_dir.mkdir(parents=True, exist_ok=True)
        with self.settings_file.open("w", encoding="utf-8") as f:
            f.write(comment_manager.get_file_header())
            for section, values in sections.items():
                f.write(section_comments[section])
                f.write(f"[{section}]\n")
                for key, value in values.items():
                    inline_comment = key_comments[section].get(key, "")
                    if inline_comment:
                        f.write(f"{key} = {value}  {inline_comment}\n")
                    else:
                        f.write(f"{key} = {value}\n")

    def _convert_to_global_config(
        self, config: configparser.ConfigParser
    ) -> GlobalConfig:
        """Convert configparser to typed GlobalConfig.

        Args:
            config: Configuration to convert

        Returns:
            Typed global configuration

        """

        def get_value(section: str, key: str, default: str) -> str:
            """Get a config value with inline comments stripped."""
            value = config.get(section, key, fallback=default)
            return _strip_inline_comment(value)

        binary = get_value(SECTION_GPGV, KEY_BINARY, DEFAULT_GPGV_BINARY)
        # A bare name is looked up on PATH; only home-relative paths expand
        if binary.startswith("~"):
            binary = str(Paths.expand_path(binary))
        return GlobalConfig(
            config_version=get_value(
                SECTION_DEFAULT, KEY_CONFIG_VERSION, CONFIG_VERSION
            ),
            log_level=get_value(
                SECTION_DEFAULT, KEY_LOG_LEVEL, DEFAULT_LOG_LEVEL
            ).upper(),
            console_log_level=get_value(
                SECTION_DEFAULT,
                KEY_CONSOLE_LOG_LEVEL,
                DEFAULT_CONSOLE_LOG_LEVEL,
            ).upper(),
            gpgv=GpgvConfig(
                binary=binary or DEFAULT_GPGV_BINARY,
                debug=self._parse_bool(get_value(SECTION_GPGV, KEY_DEBUG, "")),
            ),
        )

    @staticmethod
    def _parse_bool(value: str) -> bool:
        """Parse a boolean setting, falling back to the default."""
        states = configparser.ConfigParser.BOOLEAN_STATES
        if value.lower() in states:
            return states[value.lower()]
        if value:
            logger.warning(
                "Invalid %s value %r, using %s",
                KEY_DEBUG,
                value,
                DEFAULT_DEBUG,
            )
        return DEFAULT_DEBUG
