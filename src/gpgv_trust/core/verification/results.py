"""Request and result types for signature verification."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import orjson


@dataclass(slots=True, frozen=True)
class SoonWorthlessSigner:
    """A signature made with a digest slated for retirement."""

    key: str
    digest: str


@dataclass(slots=True, frozen=True)
class VerificationRequest:
    """A file to verify and the key it must be signed by.

    Attributes:
        source: Signature material (detached signature or clear-signed
            file)
        destination: Content being verified; equal to ``source`` for
            clear-signed files
        signed_by: Optional key specifier, either a fingerprint or the
            path of a keyring

    """

    source: Path
    destination: Path
    signed_by: str = ""

    @property
    def is_clearsigned(self) -> bool:
        """Whether signature and content live in the same file."""
        return self.source == self.destination

    @property
    def key_is_id(self) -> bool:
        """Whether ``signed_by`` names a key rather than a keyring path."""
        return bool(self.signed_by) and not self.signed_by.startswith("/")


@dataclass(slots=True, frozen=True)
class Verdict:
    """Trust decision for one verified file.

    Attributes:
        accepted: Whether the content may be trusted
        message: Diagnostic text; empty for a clean acceptance
        output: Good, then bad, then no-pubkey signer lines
        warnings: Advisory weak-digest messages
        exit_code: Exit status reported by the verifier

    """

    accepted: bool
    message: str
    output: tuple[str, ...] = ()
    warnings: tuple[str, ...] = field(default=())
    exit_code: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for the fetch pipeline.

        Returns:
            Dictionary representation

        """
        result: dict[str, Any] = {
            "accepted": self.accepted,
            "message": self.message,
            "output": list(self.output),
        }
        if self.warnings:
            result["warnings"] = list(self.warnings)
        if self.exit_code is not None:
            result["exit_code"] = self.exit_code
        return result

    def to_json(self) -> bytes:
        """Serialize the verdict as indented JSON."""
        return orjson.dumps(self.to_dict(), option=orjson.OPT_INDENT_2)
