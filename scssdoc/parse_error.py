"""Error types raised while scanning comment annotations."""

from enum import Enum


class ParseErrorKind(Enum):
    """Fatal failure categories for a single buffer or file."""

    UNEXPECTED_TOKEN = "UnexpectedToken"
    UNTERMINATED_TOKEN = "UnterminatedToken"
    UNKNOWN_ANNOTATION = "UnknownAnnotation"
    INVALID_REQUIRES_KIND = "InvalidRequiresKind"


class ParseError(Exception):
    """Raised when a comment buffer cannot be parsed.

    Carries the failure kind plus the offset and 1-based line within the text
    that was being scanned when the error occurred.
    """

    def __init__(
        self, kind: ParseErrorKind, message: str, offset: int = 0, line: int = 1
    ) -> None:
        """Initialize the error with its kind and positional context."""
        super().__init__(f"{kind.value}: {message} (line {line}, offset {offset})")
        self.kind = kind
        self.message = message
        self.offset = offset
        self.line = line


class StoreAlreadyResolvedError(RuntimeError):
    """Raised when cross references are resolved twice on the same store."""
