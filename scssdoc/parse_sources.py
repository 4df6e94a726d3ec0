"""Parallel parsing of source files with per-file failure isolation."""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path

from scssdoc.comment_extractor import parse_text
from scssdoc.models import Item
from scssdoc.parse_error import ParseError

logger = logging.getLogger(__name__)


@dataclass
class FileOutcome:
    """Result of parsing a single source file."""

    path: str
    items: int
    error: str | None = None
    error_kind: str | None = None
    line: int | None = None

    @property
    def ok(self) -> bool:
        """Return True when the file parsed without a fatal error."""
        return self.error is None


def parse_source_file(path: Path) -> list[Item]:
    """Read one UTF-8 source file and parse its documented items."""
    return parse_text(path.read_text(encoding="utf-8"))


def parse_sources(
    paths: list[Path], concurrency: int = 1
) -> tuple[list[Item], list[FileOutcome]]:
    """Parse every file, isolating fatal errors to the file that raised them.

    A failing file is logged and contributes no items. Items are merged in path
    order whatever the completion order of the workers.
    """
    per_file: dict[Path, list[Item]] = {}
    outcomes: list[FileOutcome] = []

    with ThreadPoolExecutor(max_workers=max(1, concurrency)) as executor:
        futures = {executor.submit(parse_source_file, p): p for p in paths}
        for future in as_completed(futures):
            path = futures[future]
            try:
                items = future.result()
            except ParseError as e:
                logger.error("Failed to parse %s: %s", path, e)
                outcomes.append(
                    FileOutcome(
                        path=str(path),
                        items=0,
                        error=e.message,
                        error_kind=e.kind.value,
                        line=e.line,
                    )
                )
                continue
            except (OSError, UnicodeDecodeError) as e:
                logger.error("Failed to read %s: %s", path, e)
                outcomes.append(
                    FileOutcome(
                        path=str(path),
                        items=0,
                        error=str(e),
                        error_kind=type(e).__name__,
                    )
                )
                continue
            logger.info("Parsed %s (%d items)", path, len(items))
            per_file[path] = items
            outcomes.append(FileOutcome(path=str(path), items=len(items)))

    merged = [item for p in sorted(per_file) for item in per_file[p]]
    outcomes.sort(key=lambda o: o.path)
    return merged, outcomes
