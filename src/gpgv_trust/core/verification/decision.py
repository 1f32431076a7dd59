"""Verdict and diagnostics construction.

Combines the verifier's exit status with the signer classification into
the accept/reject decision handed back to the fetch pipeline.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gpgv_trust.constants import (
    EXIT_EXEC_FAILED,
    EXIT_INVALID_SIGNATURE,
    EXIT_NODATA,
    EXIT_SUCCESS,
    HEADER_INVALID,
    HEADER_NO_PUBKEY,
    MSG_EXEC_FAILED,
    MSG_INVALID_SIGNATURE,
    MSG_NO_FINGERPRINT,
    MSG_NODATA_TEMPLATE,
    MSG_UNKNOWN_ERROR,
    MSG_WEAK_DIGEST_TEMPLATE,
    TAG_NODATA,
)
from gpgv_trust.core.verification.classification import goodsig_matches
from gpgv_trust.core.verification.results import Verdict
from gpgv_trust.logger import get_logger

if TYPE_CHECKING:
    from gpgv_trust.core.verification.classification import (
        ClassificationState,
    )

logger = get_logger(__name__)


def exit_status_message(
    exit_code: int,
    state: ClassificationState,
    *,
    key_is_id: bool,
) -> str:
    """Map the verifier's exit status to a diagnostic.

    Args:
        exit_code: Exit status of the verifier process
        state: Final classification (after key scoping)
        key_is_id: Whether the caller demanded a specific key

    Returns:
        Empty string on success, otherwise a fixed diagnostic

    """
    if exit_code == EXIT_SUCCESS:
        if state.good:
            return ""
        # Success with a demanded key but no matching good signature
        # means the signature came from some other key of the keyring
        if key_is_id:
            return MSG_INVALID_SIGNATURE
        return MSG_NO_FINGERPRINT
    if exit_code == EXIT_INVALID_SIGNATURE:
        return MSG_INVALID_SIGNATURE
    if exit_code == EXIT_EXEC_FAILED:
        return MSG_EXEC_FAILED
    if exit_code == EXIT_NODATA:
        return MSG_NODATA_TEMPLATE.format(status=TAG_NODATA)
    return MSG_UNKNOWN_ERROR


def weak_digest_warnings(state: ClassificationState) -> list[str]:
    """Build the weak digest warnings for a classification.

    Warnings are only produced when every good signer is soon worthless;
    one strong good signature is enough to stay quiet.
    """
    not_warned = [
        entry
        for entry in state.good
        if not any(
            goodsig_matches(entry, signer.key)
            for signer in state.soon_worthless
        )
    ]
    if not_warned:
        return []
    return [
        MSG_WEAK_DIGEST_TEMPLATE.format(key=signer.key, digest=signer.digest)
        for signer in state.soon_worthless
    ]


def _signer_listing(state: ClassificationState) -> str:
    """List invalid and unverifiable signers under their headers."""
    parts: list[str] = []
    if state.bad:
        parts.append(HEADER_INVALID)
        parts.extend(f"{signer}\n" for signer in state.bad)
    if state.worthless:
        parts.append(HEADER_INVALID)
        parts.extend(f"{signer}\n" for signer in state.worthless)
    if state.no_pubkey:
        parts.append(HEADER_NO_PUBKEY)
        parts.extend(f"{signer}\n" for signer in state.no_pubkey)
    return "".join(parts)


def build_verdict(
    state: ClassificationState,
    exit_code: int,
    *,
    key_is_id: bool = False,
) -> Verdict:
    """Decide whether the verified content can be trusted.

    The content is rejected when no good signer remains or any bad
    signer was seen. Signatures whose public key is unavailable are
    tolerated next to a good one, as multi-signed files often carry
    signatures by keys the local keyring does not hold.

    Args:
        state: Final classification (after key scoping)
        exit_code: Exit status of the verifier process
        key_is_id: Whether the caller demanded a specific key

    Returns:
        The verdict with its diagnostic text and signer output

    """
    status_message = exit_status_message(
        exit_code, state, key_is_id=key_is_id
    )

    warnings = weak_digest_warnings(state)
    for warning in warnings:
        logger.warning(warning)

    listing = ""
    if state.bad or state.worthless or state.no_pubkey:
        listing = _signer_listing(state)

    # A failing exit status is explained by the missing public keys
    tolerated = bool(state.good) and not state.bad and bool(state.no_pubkey)
    rejected = (
        not state.good
        or bool(state.bad)
        or (exit_code != EXIT_SUCCESS and not tolerated)
    )

    if rejected:
        # Without a listing something went wrong outside the signatures,
        # so the exit status diagnostic is the most useful message
        message = listing or status_message
        logger.error("Signature verification failed: %s", message)
        return Verdict(
            accepted=False,
            message=message,
            warnings=tuple(warnings),
            exit_code=exit_code,
        )

    message = status_message
    if tolerated:
        message = listing
        logger.warning(
            "Accepting despite unverifiable signatures: %s", message
        )

    return Verdict(
        accepted=True,
        message=message,
        output=(*state.good, *state.bad, *state.no_pubkey),
        warnings=tuple(warnings),
        exit_code=exit_code,
    )
