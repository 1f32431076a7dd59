"""Parser for the gpgv status channel.

gpgv writes one machine-readable record per line to its status file
descriptor, each line starting with the ``[GNUPG:] `` sentinel followed
by a keyword. Only the keywords that influence the trust decision are
decoded; every other line is skipped.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from gpgv_trust.constants import (
    STATUS_PREFIX,
    TAG_BADSIG,
    TAG_GOODSIG,
    TAG_KEYEXPIRED,
    TAG_NO_PUBKEY,
    TAG_NODATA,
    TAG_REVKEYSIG,
    TAG_VALIDSIG,
    VALIDSIG_DIGEST_FIELD,
)
from gpgv_trust.exceptions import MalformedStatusLineError
from gpgv_trust.logger import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

logger = get_logger(__name__)

_HEX_RUN = re.compile(r"[0-9A-Fa-f]*")


class StatusKind(Enum):
    """Status keywords acted upon by the classifier."""

    BADSIG = TAG_BADSIG
    NO_PUBKEY = TAG_NO_PUBKEY
    NODATA = TAG_NODATA
    KEYEXPIRED = TAG_KEYEXPIRED
    REVKEYSIG = TAG_REVKEYSIG
    GOODSIG = TAG_GOODSIG
    VALIDSIG = TAG_VALIDSIG


_KINDS_BY_TAG = {kind.value: kind for kind in StatusKind}


@dataclass(slots=True, frozen=True)
class StatusEvent:
    """A decoded status line.

    Attributes:
        kind: The status keyword
        signer: Signer identity. ``GOODSIG <keyid>`` for GOODSIG, the bare
            fingerprint for VALIDSIG, the whole record otherwise
            (e.g. ``NO_PUBKEY 1234ABCD``).
        fields: Whitespace-separated arguments following the keyword

    """

    kind: StatusKind
    signer: str
    fields: tuple[str, ...] = ()

    @property
    def digest_token(self) -> str:
        """Hash algorithm id token of a VALIDSIG record.

        Raises:
            MalformedStatusLineError: If the record is too short to carry
                the hash algorithm field

        """
        try:
            return self.fields[VALIDSIG_DIGEST_FIELD]
        except IndexError:
            msg = (
                f"{self.kind.value} has {len(self.fields)} fields, "
                f"expected more than {VALIDSIG_DIGEST_FIELD}"
            )
            raise MalformedStatusLineError(msg, target=self.signer) from None


def leading_hex(text: str) -> str:
    """Return the hexadecimal run at the start of ``text``."""
    match = _HEX_RUN.match(text)
    return match.group(0) if match else ""


def parse_status_line(line: str) -> StatusEvent | None:
    """Decode one status line.

    Args:
        line: A raw line from the status channel, with or without its
            trailing newline

    Returns:
        The decoded event, or None for lines that are not status records
        or carry a keyword the classifier does not act upon

    """
    if not line.startswith(STATUS_PREFIX):
        return None

    record = line[len(STATUS_PREFIX) :].rstrip("\r\n")
    tag, _, remainder = record.partition(" ")
    kind = _KINDS_BY_TAG.get(tag)
    if kind is None:
        return None

    if kind is StatusKind.GOODSIG:
        return StatusEvent(kind, f"{tag} {leading_hex(remainder)}")

    if kind is StatusKind.VALIDSIG:
        fields = tuple(remainder.split())
        return StatusEvent(kind, leading_hex(remainder), fields)

    return StatusEvent(kind, record, tuple(remainder.split()))


def iter_status_events(
    lines: Iterable[str],
    *,
    debug: bool = False,
) -> Iterator[StatusEvent]:
    """Lazily decode the status records found in ``lines``.

    Args:
        lines: Status channel lines; consumed once
        debug: Trace every line read and every record recognized

    Yields:
        Decoded events in channel order

    """
    for line in lines:
        if debug:
            logger.debug("Read: %s", line.rstrip("\r\n"))
        event = parse_status_line(line)
        if event is None:
            continue
        if debug:
            logger.debug("Got %s, key ID: %s", event.kind.value, event.signer)
        yield event
