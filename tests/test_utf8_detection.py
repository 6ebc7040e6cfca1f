"""Tests for the UTF-8 heuristic behind the Auto encoding."""

import pytest

from services.usdx.encoding import AUTO, is_utf8


class TestIsUtf8:
    """Test the byte classifier state machine"""

    @pytest.mark.parametrize(
        "raw",
        [
            b"",
            b"plain ascii",
            b"tab\tand\r\nnewlines",
            "Über".encode("utf-8"),
            "日本語".encode("utf-8"),
            "Ω≈ç√".encode("utf-8"),
            "😀".encode("utf-8"),
        ],
    )
    def test_accepts_utf8(self, raw):
        assert is_utf8(raw) is True

    @pytest.mark.parametrize(
        "raw",
        [
            "König".encode("cp1252"),
            "Dvořák".encode("cp1250"),
            b"\x00",
            b"\x7f",
            b"\x1b[0m",
            b"\xc0\x80",  # overlong lead byte
            b"\xf5\x80\x80\x80",  # beyond U+10FFFF
        ],
    )
    def test_rejects_non_utf8(self, raw):
        assert is_utf8(raw) is False

    def test_rejects_truncated_sequence(self):
        assert is_utf8("Ü".encode("utf-8")[:1]) is False
        assert is_utf8("日".encode("utf-8")[:2]) is False

    def test_lone_continuation_byte_rejected(self):
        assert is_utf8(b"\x80") is False

    def test_state_is_not_retained_between_calls(self):
        assert is_utf8(b"\xc3") is False
        assert is_utf8(b"\x9c") is False
        assert is_utf8(b"\xc3\x9c") is True

    def test_legacy_ranges_are_lenient(self):
        # After 0xE0 only 0xA0-0xBF continue
        assert is_utf8(b"\xe0\xa0\x80") is True
        # After 0xE0 a byte below 0xA0 is rejected
        assert is_utf8(b"\xe0\x80\x80") is False
        # After 0xED only 0x80-0x9F continue
        assert is_utf8(b"\xed\x9f\xbf") is True
        assert is_utf8(b"\xed\xa0\x80") is False


class TestAutoEncoding:
    """Test Auto picking UTF-8 or the CP1250 fallback"""

    def test_name(self):
        assert AUTO.name == "Auto"

    def test_utf8_input(self):
        assert AUTO.decode("Über".encode("utf-8")) == "Über"

    def test_fallback_input(self):
        assert AUTO.decode("Łódź".encode("cp1250")) == "Łódź"
