"""Data models for non-fatal diagnostics raised while linking items."""

from dataclasses import dataclass
from enum import Enum


class DiagnosticKind(Enum):
    """Categories of observational warnings."""

    UNRESOLVED_ALIAS = "UnresolvedAlias"
    UNRESOLVED_REQUIREMENT = "UnresolvedRequirement"
    INVALID_TYPE_TAG = "InvalidTypeTag"
    INVALID_LINK_URL = "InvalidLinkUrl"


@dataclass(frozen=True)
class Diagnostic:
    """A warning about one item; never alters item data."""

    kind: DiagnosticKind
    item: str
    message: str
