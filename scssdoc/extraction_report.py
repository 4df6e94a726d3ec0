"""Report of one extraction run: per-file outcomes and diagnostics."""

import json
import time
from collections import Counter
from pathlib import Path
from typing import Any

from scssdoc.diagnostic import Diagnostic
from scssdoc.parse_sources import FileOutcome

SCHEMA_VERSION = 1


class ExtractionReport:
    """Collects outcomes of a run and writes them as JSON."""

    def __init__(self, config_hash: str, schema_version: int = SCHEMA_VERSION) -> None:
        """Initialize the report for a given configuration."""
        self.config_hash = config_hash
        self.schema_version = schema_version
        self.outcomes: list[FileOutcome] = []
        self.diagnostics: list[Diagnostic] = []
        self.category_counts: dict[str, int] = {}
        self.start_time = time.time()

    def add_outcomes(self, outcomes: list[FileOutcome]) -> None:
        """Record per-file parse outcomes."""
        self.outcomes.extend(outcomes)

    def add_diagnostics(self, diagnostics: list[Diagnostic]) -> None:
        """Record non-fatal diagnostics from cross-reference resolution."""
        self.diagnostics.extend(diagnostics)

    def to_dict(self) -> dict[str, Any]:
        """Build the report payload."""
        return {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "schema_version": self.schema_version,
                "total_files": len(self.outcomes),
                "failed_files": sum(1 for o in self.outcomes if not o.ok),
                "total_items": sum(o.items for o in self.outcomes),
            },
            "files": [
                {
                    "path": o.path,
                    "items": o.items,
                    "error": o.error,
                    "error_kind": o.error_kind,
                    "line": o.line,
                }
                for o in self.outcomes
            ],
            "diagnostics": [
                {"kind": d.kind.value, "item": d.item, "message": d.message}
                for d in self.diagnostics
            ],
            "stats": self._compute_stats(),
        }

    def write(self, path: str | Path) -> None:
        """Write the report as indented JSON."""
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)

    def _compute_stats(self) -> dict[str, Any]:
        kind_counts = Counter(d.kind.value for d in self.diagnostics)
        return {
            "diagnostic_counts": dict(sorted(kind_counts.items())),
            "category_counts": dict(self.category_counts),
        }
