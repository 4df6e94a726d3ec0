"""Logic for sorting items and splitting them into output categories."""

from collections.abc import Iterable

from scssdoc.models import Item, ItemKind

CATEGORIES = tuple(f"{kind.value}s" for kind in ItemKind)


def partition_items(items: Iterable[Item]) -> dict[str, list[Item]]:
    """Sort items by name and group them under functions, mixins and variables."""
    out: dict[str, list[Item]] = {key: [] for key in CATEGORIES}
    for item in sorted(items, key=lambda it: it.name):
        if item.kind is None:
            continue
        out[f"{item.kind.value}s"].append(item)
    return out
