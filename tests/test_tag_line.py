"""Tests for line iteration and tag line splitting."""

import io

import pytest

from model.diagnostics import LineReadError
from services.usdx.encoding import UTF8
from services.usdx.parsers import USDX_TAGS, is_tag_line, is_usdx_tag, iter_lines, split_tag_line


class TestIsTagLine:
    @pytest.mark.parametrize("line", [b"#TITLE:Foo", b"#", b"##X", b"#:value"])
    def test_tag_lines(self, line):
        assert is_tag_line(line)

    @pytest.mark.parametrize("line", [b"", b" #TITLE:Foo", b": 0 1 2 la", b"E", b"\xef\xbb\xbf#TITLE:Foo"])
    def test_other_lines(self, line):
        assert not is_tag_line(line)


class TestSplitTagLine:
    @pytest.mark.parametrize(
        "line,expected",
        [
            (b"#TITLE:Foo", ("TITLE", "Foo")),
            (b"##TITLE:Foo", ("TITLE", "Foo")),
            (b"#TITLE:", ("TITLE", "")),
            (b"#TITLE:a:b", ("TITLE", "a:b")),
            (b"#NOCOLON", ("", "NOCOLON")),
            (b"#", ("", "")),
            (b"#:value", ("", "value")),
            (b"# TITLE : Foo ", (" TITLE ", " Foo ")),
        ],
    )
    def test_split(self, line, expected):
        assert split_tag_line(line, UTF8) == expected

    def test_name_and_value_decoded(self):
        assert split_tag_line("#TÍTULO:Canción".encode("utf-8"), UTF8) == ("TÍTULO", "Canción")


class TestIterLines:
    def test_lf_and_crlf(self):
        assert list(iter_lines(io.BytesIO(b"a\nb\r\nc"))) == [b"a", b"b", b"c"]

    def test_trailing_newline_adds_no_line(self):
        assert list(iter_lines(io.BytesIO(b"a\n"))) == [b"a"]

    def test_blank_lines_are_kept(self):
        assert list(iter_lines(io.BytesIO(b"\n\na\n"))) == [b"", b"", b"a"]

    def test_only_one_cr_dropped(self):
        assert list(iter_lines(io.BytesIO(b"a\r\r\n"))) == [b"a\r"]

    def test_lone_cr_is_not_a_terminator(self):
        assert list(iter_lines(io.BytesIO(b"a\rb\n"))) == [b"a\rb"]

    def test_max_length_line_is_accepted(self):
        line = b"x" * (64 * 1024 - 1)
        assert list(iter_lines(io.BytesIO(line + b"\n"))) == [line]

    def test_max_length_last_line_without_newline(self):
        line = b"x" * (64 * 1024 - 1)
        assert list(iter_lines(io.BytesIO(line))) == [line]

    def test_line_filling_whole_buffer_is_too_long(self):
        with pytest.raises(LineReadError):
            list(iter_lines(io.BytesIO(b"x" * (64 * 1024) + b"\n")))

    def test_carriage_return_counts_towards_limit(self):
        with pytest.raises(LineReadError):
            list(iter_lines(io.BytesIO(b"x" * (64 * 1024 - 1) + b"\r\n")))

    def test_too_long_line(self):
        with pytest.raises(LineReadError):
            list(iter_lines(io.BytesIO(b"x" * (64 * 1024))))


class TestUsdxTags:
    def test_known_tags(self):
        assert len(USDX_TAGS) == 28
        assert is_usdx_tag("MEDLEYSTARTBEAT")
        assert not is_usdx_tag("AUDIO")
        assert not is_usdx_tag("title")
