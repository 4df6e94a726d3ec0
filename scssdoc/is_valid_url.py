"""Predicate for checking ``@link`` URLs."""

import re

URL_RE = re.compile(
    r"https?://(www\.)?[-a-zA-Z0-9@:%._+~#=]{2,256}\.[a-z]{2,6}\b"
    r"[-a-zA-Z0-9@:%_+.~#?&/=]*"
)


def is_valid_url(url: str) -> bool:
    """Check if the URL is an absolute http(s) URL."""
    return URL_RE.fullmatch(url) is not None
