"""Logic for finding stylesheet sources under a directory tree."""

import logging
import os
from collections.abc import Iterable
from pathlib import Path

import pathspec

logger = logging.getLogger(__name__)


def discover_sources(
    root: Path, extensions: Iterable[str], exclude: Iterable[str] = ()
) -> tuple[list[Path], int]:
    """Return sorted source files under ``root`` and the number omitted.

    Unreadable directories are logged and skipped. ``exclude`` holds gitwildmatch
    patterns matched against root-relative POSIX paths.
    """
    suffixes = {e.lower() if e.startswith(".") else f".{e.lower()}" for e in extensions}
    matcher = pathspec.PathSpec.from_lines("gitwildmatch", list(exclude))

    def _on_error(err: OSError) -> None:
        logger.warning("Cannot read directory %s: %s", err.filename, err.strerror)

    found: list[Path] = []
    omitted = 0
    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
        base = Path(dirpath)
        # Prune excluded directories in place so os.walk skips them.
        dirnames[:] = [
            d
            for d in dirnames
            if not matcher.match_file(f"{(base / d).relative_to(root).as_posix()}/")
        ]
        for name in filenames:
            path = base / name
            rel = path.relative_to(root).as_posix()
            if matcher.match_file(rel):
                omitted += 1
                continue
            if path.suffix.lower() not in suffixes:
                logger.debug("File `%s` is not a stylesheet source. Omitted.", rel)
                omitted += 1
                continue
            found.append(path)
    return sorted(found), omitted
