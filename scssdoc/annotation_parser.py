"""Logic for turning one comment buffer into a documented item.

A buffer is the text of one documentation comment followed by the declaration
line it documents. The parser walks it line by line: annotation lines
(``@keyword ...``) are dispatched to capture routines, a ``$name: value;`` line
is read as a variable declaration and any other line adds to the description.
"""

import re
from collections.abc import Callable

from scssdoc.cursor import LINE_BREAK, Cursor
from scssdoc.models import Item, ItemKind, Link, Param, Requirement, Return
from scssdoc.normalize_text import normalize_text
from scssdoc.parse_error import ParseErrorKind

# Characters skipped between lines: blank space plus leftover comment markers.
SKIPPED = frozenset(" \t\r\n/*")
WORD_END = frozenset(" \t\r\n")
TYPE_SEPARATOR_RE = re.compile(r"\s\|\s")
REQUIRES_KINDS = {
    "function": ItemKind.FUNCTION,
    "mixin": ItemKind.MIXIN,
    "var": ItemKind.VARIABLE,
}
GLOBAL_FLAG = "!global"


class AnnotationParser:
    """Parses a single comment buffer with its own cursor and item."""

    def __init__(self, buffer: str) -> None:
        """Initialize the parser over one buffer."""
        self.cursor = Cursor(buffer)
        self.item = Item()
        self._handlers: dict[str, Callable[[str], None]] = {
            "access": self._capture_simple,
            "since": self._capture_simple,
            "alias": self._capture_simple,
            "author": self._capture_simple,
            "deprecated": self._capture_deprecated,
            "throws": self._capture_list,
            "exception": self._capture_list,
            "todo": self._capture_list,
            "requires": self._capture_requires,
            "require": self._capture_requires,
            "ignore": self._capture_ignore,
            "param": self._capture_param,
            "arg": self._capture_param,
            "argument": self._capture_param,
            "link": self._capture_link,
            "return": self._capture_return,
            "returns": self._capture_return,
            "var": self._capture_variable_doc,
            "function": self._capture_signature,
            "mixin": self._capture_signature,
        }

    def parse(self) -> Item:
        """Parse the whole buffer and return the resulting item."""
        cur = self.cursor
        while not cur.at_end():
            ch = cur.current()
            cur.advance()
            if ch in SKIPPED:
                continue
            if ch == "@":
                self._capture_annotation(cur.read_until(WORD_END))
            elif ch == "$":
                self._capture_variable()
            else:
                self._append_description(ch + cur.consume_line())
        return self.item

    def _append_description(self, line: str) -> None:
        if self.item.description is None:
            self.item.description = line
        else:
            self.item.description += LINE_BREAK + line

    def _capture_annotation(self, keyword: str) -> None:
        handler = self._handlers.get(keyword)
        if handler is None:
            # Point at the "@" that introduced the keyword.
            self.cursor.retreat(len(keyword) + 1)
            raise self.cursor.error(
                ParseErrorKind.UNKNOWN_ANNOTATION, f"unknown annotation @{keyword}"
            )
        self.cursor.skip_whitespace()
        handler(keyword)

    def _rest_of_line(self) -> str:
        return normalize_text(self.cursor.consume_line())

    def _capture_simple(self, key: str) -> None:
        setattr(self.item, key, self._rest_of_line())

    def _capture_deprecated(self, _key: str) -> None:
        if self.cursor.current() == "@":
            # Another annotation follows on the same line; leave it for the loop.
            self.item.deprecated = ""
        else:
            self.item.deprecated = self._rest_of_line()

    def _capture_list(self, key: str) -> None:
        target = self.item.todo if key == "todo" else self.item.throws
        target.append(self._rest_of_line())

    def _capture_ignore(self, _key: str) -> None:
        self.cursor.consume_line()

    def _capture_type(self) -> list[str]:
        """Read a ``{type | type}`` group into an ordered list of tags."""
        cur = self.cursor
        cur.skip_whitespace()
        cur.expect("{")
        raw = normalize_text(cur.consume_until("}"))
        return TYPE_SEPARATOR_RE.split(raw)

    def _skip_hyphen(self) -> None:
        cur = self.cursor
        if cur.current() == "-":
            cur.advance()
            cur.skip_whitespace()

    def _capture_requires(self, _key: str) -> None:
        cur = self.cursor
        kind = None
        if cur.current() == "{":
            cur.advance()
            declared = normalize_text(cur.consume_until("}"))
            if declared not in REQUIRES_KINDS:
                raise cur.error(
                    ParseErrorKind.INVALID_REQUIRES_KIND,
                    f"{declared!r} is not a valid kind of @requires, "
                    "use `function`, `mixin` or `var`",
                )
            kind = REQUIRES_KINDS[declared]
            cur.skip_whitespace()
        self.item.requires.append(Requirement(target=self._rest_of_line(), kind=kind))

    def _capture_param(self, _key: str) -> None:
        cur = self.cursor
        types = self._capture_type()
        cur.skip_whitespace()
        cur.expect("$")
        name = cur.read_until(WORD_END | {"("})
        cur.skip_whitespace()

        default_value = ""
        if cur.current() == "(":
            cur.advance()
            default_value = normalize_text(cur.consume_until(")"))
            cur.skip_whitespace()

        self._skip_hyphen()
        self.item.parameters.append(
            Param(
                type=types,
                name=name,
                default_value=default_value,
                description=self._rest_of_line(),
            )
        )

    def _capture_return(self, _key: str) -> None:
        types = self._capture_type()
        self.cursor.skip_whitespace()
        self._skip_hyphen()
        self.item.returns = Return(type=types, description=self._rest_of_line())

    def _capture_link(self, _key: str) -> None:
        url = self.cursor.read_until(WORD_END)
        self.cursor.skip_whitespace()
        self.item.links.append(Link(url=url, label=self._rest_of_line()))

    def _capture_variable_doc(self, _key: str) -> None:
        cur = self.cursor
        self.item.kind = ItemKind.VARIABLE
        self.item.datatype = self._capture_type()
        cur.skip_whitespace()
        self._skip_hyphen()
        if cur.current() == "$":
            return
        description = self._rest_of_line()
        if description:
            self._append_description(description)

    def _capture_signature(self, key: str) -> None:
        cur = self.cursor
        self.item.kind = ItemKind(key)
        self.item.name = normalize_text(cur.read_until({"(", "{", LINE_BREAK}))
        # Nothing after the signature belongs to the documentation.
        cur.pos = len(cur.text)

    def _capture_variable(self) -> None:
        cur = self.cursor
        if self.item.kind is None:
            self.item.kind = ItemKind.VARIABLE
        self.item.name = cur.read_until(WORD_END | {":"})
        cur.skip_whitespace()
        if cur.current() == ":":
            cur.advance()
            cur.skip_whitespace()

        value = cur.consume_until(";")
        cur.consume_line()
        if GLOBAL_FLAG in value:
            self.item.access = "global"
            value = value.replace(GLOBAL_FLAG, "")
        else:
            self.item.access = "scoped"
        self.item.value = normalize_text(value)


def parse_buffer(buffer: str) -> Item:
    """Parse one comment buffer into an item."""
    return AnnotationParser(buffer).parse()
