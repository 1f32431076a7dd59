"""Signature verification engine.

Reads gpgv's status channel, classifies the signers it reports and turns
the result into an accept/reject verdict for downloaded files.
"""

from gpgv_trust.core.verification.classification import (
    ClassificationState,
    classify,
)
from gpgv_trust.core.verification.decision import build_verdict
from gpgv_trust.core.verification.digests import (
    DigestInfo,
    DigestTrust,
    lookup,
)
from gpgv_trust.core.verification.results import (
    SoonWorthlessSigner,
    Verdict,
    VerificationRequest,
)
from gpgv_trust.core.verification.runner import (
    GpgvRunner,
    StaticStatusChannel,
    StatusChannel,
)
from gpgv_trust.core.verification.scoping import restrict_to_key
from gpgv_trust.core.verification.service import SignatureVerificationService
from gpgv_trust.core.verification.status import (
    StatusEvent,
    StatusKind,
    iter_status_events,
    parse_status_line,
)

__all__ = [
    "ClassificationState",
    "DigestInfo",
    "DigestTrust",
    "GpgvRunner",
    "SignatureVerificationService",
    "SoonWorthlessSigner",
    "StaticStatusChannel",
    "StatusChannel",
    "StatusEvent",
    "StatusKind",
    "Verdict",
    "VerificationRequest",
    "build_verdict",
    "classify",
    "iter_status_events",
    "lookup",
    "parse_status_line",
    "restrict_to_key",
]
