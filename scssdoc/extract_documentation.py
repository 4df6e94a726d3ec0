"""Pipeline from a source tree to sorted, linked and partitioned items."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from scssdoc.diagnostic import Diagnostic
from scssdoc.discover_sources import discover_sources
from scssdoc.item_store import ItemStore
from scssdoc.models import Item
from scssdoc.parse_sources import FileOutcome, parse_sources
from scssdoc.partition_items import partition_items
from scssdoc.resolve_cross_references import resolve_cross_references

logger = logging.getLogger(__name__)


@dataclass
class ExtractionResult:
    """Everything produced by one extraction run."""

    data: dict[str, list[Item]]
    diagnostics: list[Diagnostic] = field(default_factory=list)
    outcomes: list[FileOutcome] = field(default_factory=list)
    omitted: int = 0

    @property
    def failed(self) -> list[FileOutcome]:
        """Return the outcomes of files that could not be parsed."""
        return [o for o in self.outcomes if not o.ok]


def extract_documentation(root: Path, config: dict[str, Any]) -> ExtractionResult:
    """Extract documented items from every source file under ``root``."""
    files, omitted = discover_sources(
        root, config.get("extensions", [".scss"]), config.get("exclude", [])
    )
    logger.info("Found %d source files (%d omitted)", len(files), omitted)

    items, outcomes = parse_sources(files, int(config.get("concurrency", 1)))

    # Linking needs the complete corpus, so it only starts once all files joined.
    store = ItemStore.from_items(items)
    diagnostics = resolve_cross_references(
        store, warnings=bool(config.get("warnings", True))
    )

    return ExtractionResult(
        data=partition_items(store),
        diagnostics=diagnostics,
        outcomes=outcomes,
        omitted=omitted,
    )
