"""Tests for the shared character cursor."""

import pytest

from sapling.parser import Cursor, ErrorKind, ParseError


class TestPrimitives:
    def test_peek_does_not_advance(self):
        cur = Cursor("abc")
        assert cur.peek_char() == "a"
        assert cur.peek_char() == "a"
        assert cur.pos == 0

    def test_advance_char(self):
        cur = Cursor("ab")
        assert cur.advance_char() == "a"
        assert cur.advance_char() == "b"
        assert cur.at_end()

    def test_starts_with(self):
        cur = Cursor("xx<!--", pos=2)
        assert cur.starts_with("<!--")
        assert not cur.starts_with("-->")

    def test_consume_while(self):
        cur = Cursor("abc123")
        assert cur.consume_while(str.isalpha) == "abc"
        assert cur.pos == 3

    def test_consume_while_empty_when_test_fails(self):
        cur = Cursor("123")
        assert cur.consume_while(str.isalpha) == ""
        assert cur.pos == 0

    def test_consume_while_stops_at_end(self):
        cur = Cursor("abc")
        assert cur.consume_while(lambda c: True) == "abc"
        assert cur.at_end()

    def test_skip_whitespace(self):
        cur = Cursor(" \t\n x")
        cur.skip_whitespace()
        assert cur.peek_char() == "x"


class TestMultiByteCharacters:
    def test_final_multibyte_character(self):
        cur = Cursor("aé")
        assert cur.advance_char() == "a"
        assert cur.advance_char() == "é"
        assert cur.at_end()

    def test_final_astral_character(self):
        cur = Cursor("🌱")
        assert cur.advance_char() == "🌱"
        assert cur.at_end()
        assert cur.pos == len("🌱")


class TestErrors:
    def test_peek_at_end(self):
        with pytest.raises(ParseError) as exc_info:
            Cursor("").peek_char()
        assert exc_info.value.kind is ErrorKind.UNEXPECTED_END_OF_INPUT

    def test_advance_at_end_uses_given_kind(self):
        with pytest.raises(ParseError) as exc_info:
            Cursor("").advance_char(ErrorKind.UNTERMINATED_TAG)
        assert exc_info.value.kind is ErrorKind.UNTERMINATED_TAG

    def test_expect_mismatch(self):
        cur = Cursor("ab")
        with pytest.raises(ParseError) as exc_info:
            cur.expect("ax")
        assert exc_info.value.kind is ErrorKind.UNEXPECTED_CHARACTER
        assert exc_info.value.position == 1

    def test_location(self):
        cur = Cursor("ab\ncd\nef")
        assert cur.location(0) == (1, 1)
        assert cur.location(4) == (2, 2)
        assert cur.location(6) == (3, 1)

    def test_error_carries_line_and_column(self):
        err = Cursor("ab\ncd", pos=4).error("boom", ErrorKind.UNEXPECTED_CHARACTER)
        assert (err.line, err.column, err.position) == (2, 2, 4)
        assert str(err) == "boom (line 2, column 2)"
