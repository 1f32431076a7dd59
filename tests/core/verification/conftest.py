"""Shared test fixtures for verification module tests.

- Fingerprints and long key ids of two signing keys
- Builders for gpgv status lines
- gpgv_config: verifier settings with debug tracing enabled
"""

from pathlib import Path

import pytest

from gpgv_trust.types import GpgvConfig

FPR_A = "A1B2C3D4E5F60718293A4B5C6D7E8F9012345678"
FPR_B = "0F1E2D3C4B5A69788796A5B4C3D2E1F00F1E2D3C"
KEYID_A = FPR_A[-16:]
KEYID_B = FPR_B[-16:]

SHA256 = 8
SHA1 = 2
MD5 = 1

CLEARSIGNED_CONTENT = """-----BEGIN PGP SIGNED MESSAGE-----
Hash: SHA256

Origin: Example
Suite: stable
-----BEGIN PGP SIGNATURE-----

iQIzBAEBCAAdFiEEobLD1OX2BxgpOktcbX6PkBI0VngFAmWSlAAACgkQbX6PkBI0
-----END PGP SIGNATURE-----
"""


def goodsig(keyid: str, user: str = "Example <e@example.org>") -> str:
    """Build a GOODSIG status line."""
    return f"[GNUPG:] GOODSIG {keyid} {user}\n"


def validsig(fingerprint: str, digest: int = SHA256) -> str:
    """Build a VALIDSIG status line as printed by gpgv 2.x."""
    return (
        f"[GNUPG:] VALIDSIG {fingerprint} 2024-01-01 1704067200 0 4 0 1 "
        f"{digest} 01 {fingerprint}\n"
    )


def signature_lines(
    keyid: str, fingerprint: str, digest: int = SHA256
) -> list[str]:
    """Status lines of one good signature in gpgv's emission order."""
    return [
        "[GNUPG:] NEWSIG\n",
        f"[GNUPG:] KEY_CONSIDERED {fingerprint} 0\n",
        "[GNUPG:] SIG_ID sigid 2024-01-01 1704067200\n",
        goodsig(keyid),
        validsig(fingerprint, digest),
    ]


@pytest.fixture
def gpgv_config() -> GpgvConfig:
    """Verifier settings with status line tracing enabled."""
    return GpgvConfig(binary="gpgv", debug=True)


@pytest.fixture
def clearsigned_file(tmp_path: Path) -> Path:
    """A clear-signed file on disk.

    Args:
        tmp_path: pytest temporary path fixture.

    Returns:
        Path: Path to the InRelease file.
    """
    path = tmp_path / "InRelease"
    path.write_text(CLEARSIGNED_CONTENT, encoding="utf-8")
    return path
