"""Signature verification service.

Runs one verification request end to end: open the status channel,
classify the status records while the verifier runs, reap its exit
status, apply key scoping and build the verdict.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from gpgv_trust.core.verification.classification import (
    ClassificationState,
    classify,
)
from gpgv_trust.core.verification.decision import build_verdict
from gpgv_trust.core.verification.results import VerificationRequest
from gpgv_trust.core.verification.runner import GpgvRunner
from gpgv_trust.core.verification.scoping import restrict_to_key
from gpgv_trust.core.verification.status import iter_status_events
from gpgv_trust.logger import get_logger

if TYPE_CHECKING:
    from gpgv_trust.core.verification.results import Verdict
    from gpgv_trust.core.verification.runner import StatusChannel
    from gpgv_trust.types import GpgvConfig

logger = get_logger(__name__)


class SignatureVerificationService:
    """Turns gpgv status output into trust verdicts."""

    def __init__(
        self,
        config: GpgvConfig,
        runner: GpgvRunner | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            config: Verifier settings
            runner: Process runner; built from ``config`` when omitted

        """
        self.debug = config["debug"]
        self.runner = runner or GpgvRunner(config)

    def verify(
        self,
        source: Path | str,
        destination: Path | str | None = None,
        signed_by: str = "",
    ) -> Verdict:
        """Verify the signature(s) on a downloaded file.

        Args:
            source: Detached signature or clear-signed file
            destination: Signed content; defaults to ``source``
                (clear-signed)
            signed_by: Fingerprint the content must be signed by, or the
                path of the keyring to verify against

        Returns:
            The trust verdict

        Raises:
            VerificationSetupError: If the verifier cannot be started

        """
        request = make_request(source, destination, signed_by)
        logger.debug(
            "Verifying %s (signed by: %s)",
            request.source,
            request.signed_by or "any key",
        )
        with self.runner.open(request) as channel:
            return self.verify_channel(channel, request)

    def verify_channel(
        self,
        channel: StatusChannel,
        request: VerificationRequest,
    ) -> Verdict:
        """Build the verdict for an already opened status channel."""
        state = classify(iter_status_events(channel.lines(), debug=self.debug))
        exit_code = channel.wait()
        if self.debug:
            logger.debug("gpgv exited with status %d", exit_code)

        return decide(state, exit_code, request)


def make_request(
    source: Path | str,
    destination: Path | str | None = None,
    signed_by: str = "",
) -> VerificationRequest:
    """Build a request, normalizing a bare key id to gpgv's upper case."""
    source = Path(source)
    signed_by = signed_by.strip()
    if signed_by and not signed_by.startswith("/"):
        signed_by = signed_by.upper()
    return VerificationRequest(
        source=source,
        destination=Path(destination) if destination else source,
        signed_by=signed_by,
    )


def decide(
    state: ClassificationState,
    exit_code: int,
    request: VerificationRequest,
) -> Verdict:
    """Apply key scoping for ``request`` and build the verdict."""
    if request.key_is_id:
        logger.debug(
            "Good signatures need to be limited to key %s",
            request.signed_by,
        )
        restrict_to_key(state, request.signed_by)

    verdict = build_verdict(state, exit_code, key_is_id=request.key_is_id)
    if verdict.accepted:
        logger.info("Signature accepted for %s", request.source)
    return verdict
