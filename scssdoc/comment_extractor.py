"""Logic for locating documentation comments in stylesheet source text."""

import logging
from collections.abc import Iterator

from scssdoc.annotation_parser import parse_buffer
from scssdoc.cursor import LINE_BREAK, Cursor
from scssdoc.models import Item
from scssdoc.parse_error import ParseErrorKind

logger = logging.getLogger(__name__)


def iter_comment_buffers(text: str) -> Iterator[str]:
    """Yield one buffer per documented declaration found in the text.

    A buffer is a block comment or a run of ``///`` lines plus the first
    non-comment line after it. Lines that follow no comment are ignored.
    """
    cur = Cursor(text.replace("\r\n", LINE_BREAK))
    buffer = ""
    pending = False

    while not cur.at_end():
        cur.skip_whitespace()
        ch = cur.current()
        cur.advance()

        if ch == "":
            break
        if ch == LINE_BREAK:
            continue

        if ch == "/":
            nxt = cur.current()
            if nxt == "*":
                cur.advance()
                buffer += _read_block_comment(cur)
                pending = True
            elif nxt == "/":
                cur.retreat()
                lines = _read_line_comments(cur)
                if lines is None:
                    # Plain "//" comments document nothing.
                    buffer, pending = "", False
                else:
                    buffer += lines
                    pending = True
            else:
                cur.retreat()
                raise cur.error(
                    ParseErrorKind.UNEXPECTED_TOKEN,
                    f"unexpected characters {('/' + nxt)!r}",
                )
        elif pending:
            yield buffer + _read_declaration(cur, ch) + LINE_BREAK
            buffer, pending = "", False
        else:
            cur.consume_line()


def _read_block_comment(cur: Cursor) -> str:
    """Read a block comment body; the cursor sits just after the opening "/*"."""
    body = ""
    while True:
        body += cur.consume_until("*")
        if cur.current() == "/":
            cur.advance()
            return body + cur.consume_line() + LINE_BREAK
        # Only "*/" closes the comment; other stars are content.
        body += "*"


def _read_declaration(cur: Cursor, first: str) -> str:
    """Read the declaration following a comment; ``first`` is its first character.

    Variable declarations run through their terminating ";" so multi-line values
    such as maps stay whole.
    """
    if first == "$":
        return first + cur.consume_until(";") + ";" + cur.consume_line()
    return first + cur.consume_line()


def _read_line_comments(cur: Cursor) -> str | None:
    """Read consecutive ``///`` lines; the cursor sits on the first slash.

    Returns None when the line is a plain ``//`` comment, after skipping it.
    """
    if cur.peek(2) != "/":
        cur.consume_line()
        return None

    lines = []
    while cur.current() == "/" and cur.peek() == "/" and cur.peek(2) == "/":
        while cur.current() == "/":
            cur.advance()
        cur.skip_whitespace()
        lines.append(cur.consume_line())
        cur.skip_whitespace()
    return "".join(line + LINE_BREAK for line in lines)


def parse_text(text: str) -> list[Item]:
    """Parse every documented declaration found in a source text.

    Buffers that declare neither a kind nor a name are ordinary comments and are
    dropped. A ParseError from any buffer propagates to the caller.
    """
    items = []
    for buffer in iter_comment_buffers(text):
        item = parse_buffer(buffer)
        if item.kind is None or not item.name:
            logger.debug("Skipping undocumented comment: %r", buffer[:60])
            continue
        items.append(item)
    return items
