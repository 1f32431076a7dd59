"""Digest algorithm trust table.

Indexes follow the OpenPGP hash algorithm ids that gpgv prints in the
VALIDSIG status line. The order must track gpgv's numbering exactly.
"""

from dataclasses import dataclass
from enum import Enum


class DigestTrust(Enum):
    """Trust tier of a digest algorithm."""

    UNTRUSTED = "untrusted"
    WEAK = "weak"
    TRUSTED = "trusted"


@dataclass(slots=True, frozen=True)
class DigestInfo:
    """A digest algorithm known to the verifier."""

    id: int
    name: str
    trust: DigestTrust


DIGESTS: tuple[DigestInfo, ...] = (
    DigestInfo(0, "Invalid digest", DigestTrust.UNTRUSTED),
    DigestInfo(1, "MD5", DigestTrust.UNTRUSTED),
    DigestInfo(2, "SHA1", DigestTrust.WEAK),
    DigestInfo(3, "RIPE-MD/160", DigestTrust.WEAK),
    DigestInfo(4, "Reserved digest", DigestTrust.TRUSTED),
    DigestInfo(5, "Reserved digest", DigestTrust.TRUSTED),
    DigestInfo(6, "Reserved digest", DigestTrust.TRUSTED),
    DigestInfo(7, "Reserved digest", DigestTrust.TRUSTED),
    DigestInfo(8, "SHA256", DigestTrust.TRUSTED),
    DigestInfo(9, "SHA384", DigestTrust.TRUSTED),
    DigestInfo(10, "SHA512", DigestTrust.TRUSTED),
    DigestInfo(11, "SHA224", DigestTrust.TRUSTED),
)

INVALID_DIGEST = DIGESTS[0]


def lookup(digest_id: int) -> DigestInfo:
    """Return the table entry for ``digest_id``.

    Unknown and out-of-range ids map to the untrusted "Invalid digest"
    entry.
    """
    if 0 <= digest_id < len(DIGESTS):
        return DIGESTS[digest_id]
    return INVALID_DIGEST


def lookup_token(token: str) -> DigestInfo:
    """Look up a digest by the decimal token found in a status line.

    Tokens that are not decimal integers resolve to the invalid entry.
    """
    try:
        digest_id = int(token)
    except ValueError:
        return INVALID_DIGEST
    return lookup(digest_id)
