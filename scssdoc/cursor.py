"""Character cursor over a text buffer."""

from collections.abc import Collection

from scssdoc.parse_error import ParseError, ParseErrorKind

LINE_BREAK = "\n"
HORIZONTAL_SPACE = frozenset(" \t")
WHITESPACE = frozenset(" \t\r\n")


class Cursor:
    """Tracks a position inside a text buffer.

    Each parse owns its cursor; instances are never shared between parses.
    """

    def __init__(self, text: str, pos: int = 0) -> None:
        """Initialize the cursor at the given position."""
        self.text = text
        self.pos = pos

    def at_end(self) -> bool:
        """Return True once the position has moved past the last character."""
        return self.pos >= len(self.text)

    def current(self) -> str:
        """Return the character at the position, or "" past the end."""
        if self.at_end():
            return ""
        return self.text[self.pos]

    def peek(self, offset: int = 1) -> str:
        """Return the character ``offset`` places ahead, or "" past the end."""
        i = self.pos + offset
        if 0 <= i < len(self.text):
            return self.text[i]
        return ""

    def advance(self, count: int = 1) -> "Cursor":
        """Move forward, never past the end."""
        self.pos = min(self.pos + count, len(self.text))
        return self

    def retreat(self, count: int = 1) -> "Cursor":
        """Move backward, never before the start."""
        self.pos = max(self.pos - count, 0)
        return self

    def line(self) -> int:
        """Return the 1-based line number of the position."""
        return self.text.count(LINE_BREAK, 0, self.pos) + 1

    def error(self, kind: ParseErrorKind, message: str) -> ParseError:
        """Build a ParseError located at the current position."""
        return ParseError(kind, message, offset=self.pos, line=self.line())

    def consume_until(self, stops: Collection[str]) -> str:
        """Return the text before the next stop character and move past it.

        Raises an UNTERMINATED_TOKEN error when the buffer ends first.
        """
        start = self.pos
        while not self.at_end():
            ch = self.text[self.pos]
            if ch in stops:
                value = self.text[start : self.pos]
                self.pos += 1
                return value
            self.pos += 1
        self.pos = start
        msg = f"expected one of {sorted(stops)!r} before end of input"
        raise self.error(ParseErrorKind.UNTERMINATED_TOKEN, msg)

    def read_until(self, stops: Collection[str]) -> str:
        """Return the text before the next stop character, stopping on it.

        Unlike ``consume_until`` the stop character is left unread and the end of
        the buffer is an acceptable terminator.
        """
        start = self.pos
        while not self.at_end() and self.text[self.pos] not in stops:
            self.pos += 1
        return self.text[start : self.pos]

    def consume_line(self) -> str:
        """Return the rest of the current line and move to the next one."""
        value = self.read_until(LINE_BREAK)
        self.advance()
        return value

    def skip_whitespace(self, *, newlines: bool = False) -> "Cursor":
        """Skip spaces and tabs, and line breaks too when ``newlines`` is set."""
        skip = WHITESPACE if newlines else HORIZONTAL_SPACE
        while not self.at_end() and self.text[self.pos] in skip:
            self.pos += 1
        return self

    def expect(self, char: str) -> None:
        """Move past ``char`` or raise an UNEXPECTED_TOKEN error."""
        found = self.current()
        if found != char:
            shown = repr(found) if found else "end of input"
            msg = f"expected {char!r}, found {shown}"
            raise self.error(ParseErrorKind.UNEXPECTED_TOKEN, msg)
        self.advance()
