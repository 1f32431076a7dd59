"""Restrict good signatures to a single demanded key.

gpgv accepts any signature made by a key of its keyring and has no mode
to accept only one key, so the restriction is rebuilt afterwards from
the unscoped classification.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gpgv_trust.constants import LONG_KEYID_LENGTH, TAG_GOODSIG
from gpgv_trust.logger import get_logger

if TYPE_CHECKING:
    from gpgv_trust.core.verification.classification import (
        ClassificationState,
    )

logger = get_logger(__name__)


def restrict_to_key(state: ClassificationState, key: str) -> None:
    """Narrow ``state.good`` to the GOODSIG made by ``key``.

    Every good signer first moves to ``state.no_pubkey``. If ``key`` made
    a valid signature and its ``GOODSIG <long keyid>`` entry was seen,
    that entry alone is restored as good. Otherwise no signer is good.

    Args:
        state: Classification to adjust in place
        key: Demanded key fingerprint

    """
    found = key in state.valid
    previous_good = list(state.good)
    state.no_pubkey.extend(previous_good)
    state.good = []

    if not found:
        logger.debug("Key %s made no valid signature", key)
        return

    # An expired signature is valid but not good, so GOODSIG is checked too
    expected = f"{TAG_GOODSIG} {key[-LONG_KEYID_LENGTH:]}"
    found_good = expected in previous_good
    logger.debug(
        "Key %s is valid sig, is %s also a good one? %s",
        key,
        expected,
        "yes" if found_good else "no",
    )
    if found_good:
        state.good = [expected]
        state.no_pubkey = [
            entry for entry in state.no_pubkey if entry != expected
        ]
