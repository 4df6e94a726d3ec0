"""Predicate for checking stylesheet value type tags."""

VALID_TYPES = frozenset(
    {"*", "arglist", "bool", "color", "list", "map", "null", "number", "string"}
)


def is_valid_type(tag: str) -> bool:
    """Check if the tag belongs to the known value type vocabulary."""
    return tag.strip().lower() in VALID_TYPES
