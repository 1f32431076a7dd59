"""INI parser utilities for gpgv-trust configuration.

Helpers for reading values with inline comments and for writing a
commented settings file.
"""

from datetime import UTC, datetime

from gpgv_trust.constants import (
    CONFIG_VERSION,
    ISO_DATETIME_FORMAT,
    KEY_CONFIG_VERSION,
    SECTION_DEFAULT,
    SECTION_GPGV,
)


def _strip_inline_comment(value: str) -> str:
    """Strip inline comments from configuration values.

    Args:
        value: Configuration value that may contain inline comment

    Returns:
        Value with inline comment removed (anything after '  #')
    """
    if "  #" in value:
        return value.split("  #")[0].strip()
    return value


class ConfigCommentManager:
    """Manages configuration file comments for user-friendly documentation."""

    @staticmethod
    def get_file_header() -> str:
        """Generate file header comment with description and timestamp."""
        timestamp = datetime.now(tz=UTC).strftime(ISO_DATETIME_FORMAT)
        return f"""# gpgv-trust Configuration
# Settings for signature verification of downloaded artifacts.
#
# Last updated: {timestamp}
# Configuration version: {CONFIG_VERSION}

"""

    @staticmethod
    def get_section_comments() -> dict[str, str]:
        """Get comments for each configuration section."""
        return {
            SECTION_DEFAULT: """# ========================================
# MAIN CONFIGURATION
# ========================================
# config_version: Version of configuration format (DO NOT EDIT)
# log_level: Detail level for log files (DEBUG, INFO, WARNING, ERROR)
# console_log_level: Console output detail level (DEBUG, INFO, etc.)

""",
            SECTION_GPGV: """
# ========================================
# VERIFIER
# ========================================
# binary: gpgv executable name or absolute path
# debug: Trace every status line read from gpgv (true/false)

""",
        }

    @staticmethod
    def get_key_comments() -> dict[str, dict[str, str]]:
        """Get inline comments for specific configuration keys."""
        return {
            SECTION_DEFAULT: {
                KEY_CONFIG_VERSION: "# DO NOT MODIFY - Config format version",
            },
            SECTION_GPGV: {},
        }
