"""Append-ordered collection of documented items with a name index."""

from collections.abc import Iterable, Iterator

from scssdoc.models import Item


class ItemStore:
    """Holds every item of a corpus plus a last-write-wins name lookup."""

    def __init__(self) -> None:
        """Initialize an empty store."""
        self.items: list[Item] = []
        self.index: dict[str, Item] = {}
        self.resolved = False

    @classmethod
    def from_items(cls, items: Iterable[Item]) -> "ItemStore":
        """Build a store from an iterable of items."""
        store = cls()
        for item in items:
            store.push(item)
        return store

    def push(self, item: Item) -> None:
        """Append an item; a duplicate name replaces the index entry."""
        self.items.append(item)
        self.index[item.name] = item

    def get(self, name: str) -> Item | None:
        """Return the item indexed under ``name``."""
        return self.index.get(name)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)
