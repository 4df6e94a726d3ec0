"""Whitespace normalization for captured annotation values."""


def normalize_text(text: str) -> str:
    """Strip surrounding whitespace and collapse inner runs to single spaces.

    Embedded line breaks count as whitespace, so multi-line values fold into one
    line.
    """
    return " ".join(text.split())
