"""Centralized constants module for gpgv-trust.

This module serves as the single source of truth for all shared constants
across the gpgv-trust codebase. Constants are organized by logical
categories and use typing.Final annotations to ensure immutability.

Usage:
    from gpgv_trust.constants import STATUS_PREFIX
"""

from typing import Final

# =============================================================================
# Configuration Constants
# =============================================================================

CONFIG_VERSION: Final[str] = "1.0.0"
CONFIG_FILE_NAME: Final[str] = "settings.conf"
CONFIG_DIR_NAME: Final[str] = ".config"
DEFAULT_CONFIG_SUBDIR: Final[str] = "gpgv-trust"

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "WARNING"
DEFAULT_GPGV_BINARY: Final[str] = "gpgv"
DEFAULT_DEBUG: Final[bool] = False

ISO_DATETIME_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

SECTION_DEFAULT: Final[str] = "DEFAULT"
SECTION_GPGV: Final[str] = "gpgv"

KEY_CONFIG_VERSION: Final[str] = "config_version"
KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"
KEY_BINARY: Final[str] = "binary"
KEY_DEBUG: Final[str] = "debug"

# Environment variable overriding the log directory (used by tests)
LOG_DIR_ENV_VAR: Final[str] = "GPGV_TRUST_LOG_DIR"

# =============================================================================
# Logging Constants
# =============================================================================

LOG_ROOT_NAME: Final[str] = "gpgv_trust"
LOG_FILE_NAME: Final[str] = "gpgv-trust.log"
LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024  # 1 MB
LOG_BACKUP_COUNT: Final[int] = 3

# apt-style console prefixes, e.g. "W: Signature by key ..."
LOG_LEVEL_PREFIXES: Final[dict[str, str]] = {
    "DEBUG": "D:",
    "INFO": "N:",
    "WARNING": "W:",
    "ERROR": "E:",
    "CRITICAL": "E:",
}

LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}

# =============================================================================
# Status channel protocol
# =============================================================================

# Every status line written by gpgv starts with this sentinel
STATUS_PREFIX: Final[str] = "[GNUPG:] "

TAG_BADSIG: Final[str] = "BADSIG"
TAG_NO_PUBKEY: Final[str] = "NO_PUBKEY"
TAG_NODATA: Final[str] = "NODATA"
TAG_KEYEXPIRED: Final[str] = "KEYEXPIRED"
TAG_REVKEYSIG: Final[str] = "REVKEYSIG"
TAG_GOODSIG: Final[str] = "GOODSIG"
TAG_VALIDSIG: Final[str] = "VALIDSIG"

# Position of the hash algorithm id among the VALIDSIG fields
VALIDSIG_DIGEST_FIELD: Final[int] = 7

# Number of hex digits of a long key id (GOODSIG reports long key ids)
LONG_KEYID_LENGTH: Final[int] = 16

# Armor header of a clear-signed OpenPGP message
CLEARSIGN_HEADER: Final[str] = "-----BEGIN PGP SIGNED MESSAGE-----"

# =============================================================================
# Verifier exit codes
# =============================================================================

EXIT_SUCCESS: Final[int] = 0
EXIT_INVALID_SIGNATURE: Final[int] = 1
EXIT_EXEC_FAILED: Final[int] = 111
EXIT_NODATA: Final[int] = 112

# =============================================================================
# Diagnostics
# =============================================================================

MSG_INVALID_SIGNATURE: Final[str] = (
    "At least one invalid signature was encountered."
)
MSG_NO_FINGERPRINT: Final[str] = (
    "Internal error: Good signature, but could not determine "
    "key fingerprint?!"
)
MSG_EXEC_FAILED: Final[str] = (
    "Could not execute 'gpgv' to verify signature (is gnupg installed?)"
)
MSG_NODATA_TEMPLATE: Final[str] = (
    "Clearsigned file isn't valid, got '{status}' "
    "(does the network require authentication?)"
)
MSG_UNKNOWN_ERROR: Final[str] = "Unknown error executing gpgv"

HEADER_INVALID: Final[str] = "The following signatures were invalid:\n"
HEADER_NO_PUBKEY: Final[str] = (
    "The following signatures couldn't be verified because the public "
    "key is not available:\n"
)
MSG_WEAK_DIGEST_TEMPLATE: Final[str] = (
    "Signature by key {key} uses weak digest algorithm ({digest})"
)
