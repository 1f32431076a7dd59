"""Tests for the gpgv status channel parser."""

from __future__ import annotations

import logging

import pytest

from gpgv_trust.core.verification.status import (
    StatusEvent,
    StatusKind,
    iter_status_events,
    leading_hex,
    parse_status_line,
)
from gpgv_trust.exceptions import MalformedStatusLineError
from tests.core.verification.conftest import (
    FPR_A,
    KEYID_A,
    SHA256,
    goodsig,
    signature_lines,
    validsig,
)


class TestLeadingHex:
    """Test leading_hex()."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("ABCDEF0123 Example", "ABCDEF0123"),
            ("abcdef\n", "abcdef"),
            ("XYZ", ""),
            ("", ""),
            ("0123<user>", "0123"),
        ],
    )
    def test_truncates_at_first_non_hex(
        self, text: str, expected: str
    ) -> None:
        """Test the hex run stops at the first non-hex character."""
        assert leading_hex(text) == expected


class TestParseStatusLine:
    """Test parse_status_line()."""

    def test_goodsig_keeps_tag_and_key_id_only(self) -> None:
        """Test GOODSIG drops the user id after the key id."""
        event = parse_status_line(goodsig(KEYID_A))

        assert event == StatusEvent(StatusKind.GOODSIG, f"GOODSIG {KEYID_A}")

    def test_validsig_signer_is_fingerprint(self) -> None:
        """Test VALIDSIG yields the bare fingerprint and all fields."""
        event = parse_status_line(validsig(FPR_A, SHA256))

        assert event is not None
        assert event.kind is StatusKind.VALIDSIG
        assert event.signer == FPR_A
        assert event.fields[0] == FPR_A
        assert event.digest_token == "8"

    @pytest.mark.parametrize(
        ("line", "kind", "signer"),
        [
            (
                "[GNUPG:] BADSIG 6D7E8F9012345678 Example\n",
                StatusKind.BADSIG,
                "BADSIG 6D7E8F9012345678 Example",
            ),
            (
                "[GNUPG:] NO_PUBKEY 6D7E8F9012345678\n",
                StatusKind.NO_PUBKEY,
                "NO_PUBKEY 6D7E8F9012345678",
            ),
            ("[GNUPG:] NODATA 1\n", StatusKind.NODATA, "NODATA 1"),
            (
                "[GNUPG:] KEYEXPIRED 1704067200\n",
                StatusKind.KEYEXPIRED,
                "KEYEXPIRED 1704067200",
            ),
            (
                "[GNUPG:] REVKEYSIG 6D7E8F9012345678 Example\n",
                StatusKind.REVKEYSIG,
                "REVKEYSIG 6D7E8F9012345678 Example",
            ),
        ],
    )
    def test_other_records_keep_whole_text(
        self, line: str, kind: StatusKind, signer: str
    ) -> None:
        """Test non-GOODSIG records keep their full text minus newline."""
        event = parse_status_line(line)

        assert event is not None
        assert event.kind is kind
        assert event.signer == signer

    @pytest.mark.parametrize(
        "line",
        [
            "[GNUPG:] NEWSIG\n",
            "[GNUPG:] KEY_CONSIDERED A1B2 0\n",
            "[GNUPG:] TRUST_UNDEFINED 0 pgp\n",
            "[GNUPG:] EXPKEYSIG 6D7E8F9012345678 Example\n",
            "[GNUPG:] GOODSIGNATURE 1234\n",
            "GOODSIG 1234\n",
            "gpgv: Good signature from Example\n",
            "",
        ],
    )
    def test_unrecognized_lines_are_ignored(self, line: str) -> None:
        """Test lines without a recognized keyword decode to None."""
        assert parse_status_line(line) is None

    def test_line_without_newline(self) -> None:
        """Test a final line lacking its newline still parses."""
        event = parse_status_line(f"[GNUPG:] GOODSIG {KEYID_A}")

        assert event is not None
        assert event.signer == f"GOODSIG {KEYID_A}"


class TestDigestToken:
    """Test StatusEvent.digest_token on short VALIDSIG records."""

    def test_short_validsig_raises_malformed(self) -> None:
        """Test a VALIDSIG missing the hash field raises."""
        event = parse_status_line(f"[GNUPG:] VALIDSIG {FPR_A} 2024-01-01\n")

        assert event is not None
        with pytest.raises(MalformedStatusLineError) as exc_info:
            _ = event.digest_token

        assert exc_info.value.target == FPR_A
        assert "VALIDSIG has 2 fields" in str(exc_info.value)


class TestIterStatusEvents:
    """Test iter_status_events()."""

    def test_yields_only_recognized_records_in_order(self) -> None:
        """Test a full signature block decodes to GOODSIG then VALIDSIG."""
        events = list(iter_status_events(signature_lines(KEYID_A, FPR_A)))

        assert [event.kind for event in events] == [
            StatusKind.GOODSIG,
            StatusKind.VALIDSIG,
        ]

    def test_is_lazy(self) -> None:
        """Test lines are pulled only as events are consumed."""
        consumed: list[str] = []

        def lines():
            for line in (goodsig(KEYID_A), validsig(FPR_A)):
                consumed.append(line)
                yield line

        events = iter_status_events(lines())
        assert consumed == []

        next(events)
        assert consumed == [goodsig(KEYID_A)]

    def test_debug_traces_lines(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test debug mode logs every line read and every record."""
        caplog.set_level(logging.DEBUG)

        list(iter_status_events(signature_lines(KEYID_A, FPR_A), debug=True))

        assert "Read: [GNUPG:] NEWSIG" in caplog.text
        assert f"Got GOODSIG, key ID: GOODSIG {KEYID_A}" in caplog.text
        assert f"Got VALIDSIG, key ID: {FPR_A}" in caplog.text

    def test_no_trace_without_debug(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test status lines are not traced by default."""
        caplog.set_level(logging.DEBUG)

        list(iter_status_events(signature_lines(KEYID_A, FPR_A)))

        assert "Read:" not in caplog.text
