"""Tests for the character cursor."""

import pytest

from scssdoc.cursor import Cursor
from scssdoc.parse_error import ParseError, ParseErrorKind


def test_current_and_end_sentinel() -> None:
    """Verify that reading past the end yields an empty string."""
    cur = Cursor("ab")
    assert cur.current() == "a"
    cur.advance(2)
    assert cur.at_end()
    assert cur.current() == ""
    cur.advance()
    assert cur.pos == 2


def test_retreat_stops_at_start() -> None:
    """Verify that retreating never moves before the first character."""
    cur = Cursor("ab", pos=1)
    cur.retreat().retreat()
    assert cur.pos == 0


def test_consume_until_moves_past_stop() -> None:
    """Verify that consume_until returns the text before the stop character."""
    cur = Cursor("key: value;rest")
    assert cur.consume_until(":") == "key"
    assert cur.current() == " "
    assert cur.consume_until({";", "\n"}) == " value"
    assert cur.current() == "r"


def test_consume_until_unterminated() -> None:
    """Verify that a missing stop character raises UnterminatedToken."""
    cur = Cursor("{number")
    cur.advance()
    with pytest.raises(ParseError) as exc:
        cur.consume_until("}")
    assert exc.value.kind is ParseErrorKind.UNTERMINATED_TOKEN
    assert cur.pos == 1


def test_read_until_leaves_stop_unread() -> None:
    """Verify that read_until stops on the stop character or at the end."""
    cur = Cursor("name rest")
    assert cur.read_until(" ") == "name"
    assert cur.current() == " "
    cur.advance()
    assert cur.read_until(" ") == "rest"
    assert cur.at_end()


def test_consume_line_accepts_missing_line_break() -> None:
    """Verify that the last line of a buffer needs no trailing newline."""
    cur = Cursor("first\nsecond")
    assert cur.consume_line() == "first"
    assert cur.consume_line() == "second"
    assert cur.at_end()


def test_skip_whitespace_newlines() -> None:
    """Verify that line breaks are only skipped when asked for."""
    cur = Cursor(" \t\n x")
    cur.skip_whitespace()
    assert cur.current() == "\n"
    cur.skip_whitespace(newlines=True)
    assert cur.current() == "x"


def test_expect_reports_line() -> None:
    """Verify that expect raises UnexpectedToken with the line number."""
    cur = Cursor("a\nb", pos=2)
    with pytest.raises(ParseError) as exc:
        cur.expect("{")
    assert exc.value.kind is ParseErrorKind.UNEXPECTED_TOKEN
    assert exc.value.line == 2
    assert exc.value.offset == 2
