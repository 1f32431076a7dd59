"""Console formatter for gpgv-trust.

Console records read like apt's own diagnostics: a one-letter level
prefix followed by the message, e.g. ``W: Signature by key ... uses weak
digest algorithm (SHA1)``.
"""

import logging

from gpgv_trust.constants import LOG_COLORS, LOG_LEVEL_PREFIXES


class AptConsoleFormatter(logging.Formatter):
    """Formats records as ``<prefix> <message>``.

    The prefix is colored when ``use_color`` is set; the record itself is
    never modified, so the file handler sees the plain level name.
    """

    def __init__(self, *, use_color: bool = False) -> None:
        super().__init__("%(message)s")
        self.use_color = use_color

    def prefix(self, levelname: str) -> str:
        """Return the (optionally colored) prefix for ``levelname``."""
        prefix = LOG_LEVEL_PREFIXES.get(levelname, f"{levelname}:")
        if self.use_color and levelname in LOG_COLORS:
            return f"{LOG_COLORS[levelname]}{prefix}{LOG_COLORS['RESET']}"
        return prefix

    def format(self, record: logging.LogRecord) -> str:
        return f"{self.prefix(record.levelname)} {super().format(record)}"
