"""Path constants for gpgv-trust configuration."""

from pathlib import Path

from gpgv_trust.constants import (
    CONFIG_DIR_NAME,
    DEFAULT_CONFIG_SUBDIR,
)


class Paths:
    """Application paths and directory structure."""

    HOME_DIR = Path.home()
    CONFIG_DIR = HOME_DIR / CONFIG_DIR_NAME / DEFAULT_CONFIG_SUBDIR

    @classmethod
    def expand_path(cls, path_str: str) -> Path:
        """Expand ``~`` and resolve a configured path.

        Args:
            path_str: Path string from the settings file

        Returns:
            Absolute path

        """
        return Path(path_str).expanduser().resolve()
