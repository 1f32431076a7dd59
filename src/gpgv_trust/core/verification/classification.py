"""Signer classification.

Status events are folded into a ClassificationState in two phases: each
event is first turned into a SignerEffect value describing which
collections change, then the effect is applied to the state. No
collection is mutated while another one is being iterated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from gpgv_trust.constants import TAG_GOODSIG
from gpgv_trust.core.verification.digests import (
    INVALID_DIGEST,
    DigestTrust,
    lookup_token,
)
from gpgv_trust.core.verification.results import SoonWorthlessSigner
from gpgv_trust.core.verification.status import StatusKind
from gpgv_trust.exceptions import MalformedStatusLineError
from gpgv_trust.logger import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from gpgv_trust.core.verification.status import StatusEvent

logger = get_logger(__name__)


def goodsig_matches(entry: str, fingerprint: str) -> bool:
    """Tell whether a ``GOODSIG <keyid>`` entry was made by ``fingerprint``.

    GOODSIG carries the long key id while VALIDSIG carries the full
    fingerprint, so the key id must be a suffix of the fingerprint.
    """
    if entry == fingerprint:
        return True
    prefix = f"{TAG_GOODSIG} "
    if not entry.startswith(prefix) or not fingerprint:
        return False
    keyid = entry[len(prefix) :]
    return bool(keyid) and fingerprint.upper().endswith(keyid.upper())


@dataclass(slots=True)
class ClassificationState:
    """Signer collections built while reading one status channel.

    Attributes:
        good: ``GOODSIG <keyid>`` entries not downgraded
        bad: BADSIG and NODATA records
        worthless: KEYEXPIRED and REVKEYSIG records and fingerprints of
            signatures made with an untrusted digest
        soon_worthless: Signatures made with a weak digest
        no_pubkey: NO_PUBKEY records
        valid: Every fingerprint reported by VALIDSIG
        downgraded: Fingerprints rejected for an untrusted digest

    """

    good: list[str] = field(default_factory=list)
    bad: list[str] = field(default_factory=list)
    worthless: list[str] = field(default_factory=list)
    soon_worthless: list[SoonWorthlessSigner] = field(default_factory=list)
    no_pubkey: list[str] = field(default_factory=list)
    valid: list[str] = field(default_factory=list)
    downgraded: list[str] = field(default_factory=list)

    def is_downgraded(self, goodsig: str) -> bool:
        """Tell whether a GOODSIG entry belongs to a downgraded signer."""
        return any(goodsig_matches(goodsig, fpr) for fpr in self.downgraded)

    def apply(self, effect: SignerEffect) -> None:
        """Apply one classification effect."""
        if effect.valid is not None:
            self.valid.append(effect.valid)

        if effect.downgrade is not None:
            self.downgraded.append(effect.downgrade)
            self.good = [
                entry
                for entry in self.good
                if not goodsig_matches(entry, effect.downgrade)
            ]

        if effect.soon_worthless is not None:
            self.soon_worthless.append(effect.soon_worthless)

        if effect.good is not None and not self.is_downgraded(effect.good):
            self.good.append(effect.good)
        if effect.bad is not None:
            self.bad.append(effect.bad)
        if effect.worthless is not None:
            self.worthless.append(effect.worthless)
        if effect.no_pubkey is not None:
            self.no_pubkey.append(effect.no_pubkey)


@dataclass(slots=True, frozen=True)
class SignerEffect:
    """Changes one status event makes to the classification state."""

    good: str | None = None
    bad: str | None = None
    worthless: str | None = None
    no_pubkey: str | None = None
    valid: str | None = None
    soon_worthless: SoonWorthlessSigner | None = None
    downgrade: str | None = None


def _validsig_effect(event: StatusEvent) -> SignerEffect:
    """Grade a VALIDSIG event by the strength of its digest."""
    try:
        digest = lookup_token(event.digest_token)
    except MalformedStatusLineError as e:
        logger.warning("%s; treating digest as untrusted", e)
        digest = INVALID_DIGEST

    fingerprint = event.signer
    if digest.trust is DigestTrust.TRUSTED:
        return SignerEffect(valid=fingerprint)
    if digest.trust is DigestTrust.WEAK:
        return SignerEffect(
            valid=fingerprint,
            soon_worthless=SoonWorthlessSigner(fingerprint, digest.name),
        )

    logger.debug(
        "Rejecting signature by %s made with %s", fingerprint, digest.name
    )
    return SignerEffect(
        valid=fingerprint,
        worthless=fingerprint,
        downgrade=fingerprint,
    )


def effect_for(event: StatusEvent) -> SignerEffect:
    """Compute the classification effect of one status event."""
    kind = event.kind
    if kind in (StatusKind.BADSIG, StatusKind.NODATA):
        return SignerEffect(bad=event.signer)
    if kind is StatusKind.NO_PUBKEY:
        return SignerEffect(no_pubkey=event.signer)
    if kind in (StatusKind.KEYEXPIRED, StatusKind.REVKEYSIG):
        return SignerEffect(worthless=event.signer)
    if kind is StatusKind.GOODSIG:
        return SignerEffect(good=event.signer)
    if kind is StatusKind.VALIDSIG:
        return _validsig_effect(event)
    return SignerEffect()


def classify(
    events: Iterable[StatusEvent],
    state: ClassificationState | None = None,
) -> ClassificationState:
    """Fold status events into a classification state.

    Args:
        events: Decoded status events, in channel order
        state: State to extend; a fresh one is created when omitted

    Returns:
        The populated classification state

    """
    if state is None:
        state = ClassificationState()
    for event in events:
        state.apply(effect_for(event))
    return state
