"""Data models for documented stylesheet items."""

from dataclasses import dataclass, field
from enum import Enum


class ItemKind(str, Enum):
    """Kinds of documented declarations."""

    FUNCTION = "function"
    MIXIN = "mixin"
    VARIABLE = "variable"


@dataclass
class Param:
    """A ``@param`` entry of a function or mixin."""

    type: list[str]
    name: str
    default_value: str = ""
    description: str = ""


@dataclass
class Return:
    """The ``@return`` entry of a function."""

    type: list[str]
    description: str = ""


@dataclass
class Requirement:
    """A ``@requires`` edge; ``kind`` stays None until resolved."""

    target: str
    kind: ItemKind | None = None


@dataclass
class Link:
    """A ``@link`` entry."""

    url: str
    label: str = ""

    def __post_init__(self) -> None:
        """Default the label to the URL."""
        if not self.label:
            self.label = self.url


@dataclass(frozen=True)
class UsedBy:
    """Inverse requirement edge recorded on the required item."""

    name: str
    kind: ItemKind | None


@dataclass
class Item:
    """Represents one documented function, mixin or variable."""

    name: str = ""
    kind: ItemKind | None = None
    description: str | None = None
    parameters: list[Param] = field(default_factory=list)
    returns: Return | None = None
    requires: list[Requirement] = field(default_factory=list)
    links: list[Link] = field(default_factory=list)
    alias: str | None = None
    aliased: list[str] = field(default_factory=list)
    used_by: list[UsedBy] = field(default_factory=list)
    access: str | None = None  # public/private or scoped/global
    datatype: list[str] = field(default_factory=list)
    value: str | None = None  # variables only
    deprecated: str | None = None
    since: str | None = None
    author: str | None = None
    throws: list[str] = field(default_factory=list)
    todo: list[str] = field(default_factory=list)
