"""Logic for linking items to each other once a corpus is fully loaded."""

import logging

from scssdoc.diagnostic import Diagnostic, DiagnosticKind
from scssdoc.is_valid_url import is_valid_url
from scssdoc.item_store import ItemStore
from scssdoc.models import Item, UsedBy
from scssdoc.parse_error import StoreAlreadyResolvedError
from scssdoc.type_vocabulary import is_valid_type

logger = logging.getLogger(__name__)


def resolve_cross_references(
    store: ItemStore, *, warnings: bool = True
) -> list[Diagnostic]:
    """Fill aliases and requirement edges, then collect diagnostics.

    Must run once, after every file has been merged into the store. Validation
    warnings on type tags and links are only raised when ``warnings`` is set.
    """
    if store.resolved:
        msg = "cross references were already resolved for this store"
        raise StoreAlreadyResolvedError(msg)
    store.resolved = True

    diagnostics: list[Diagnostic] = []
    _compile_aliases(store, diagnostics)
    _compile_requires(store, diagnostics)
    if warnings:
        _raise_warnings(store, diagnostics)

    for d in diagnostics:
        logger.warning("%s: %s", d.kind.value, d.message)
    return diagnostics


def _compile_aliases(store: ItemStore, diagnostics: list[Diagnostic]) -> None:
    """Record each alias on the item it points to."""
    for name, item in store.index.items():
        if not item.alias:
            continue
        target = store.get(item.alias)
        if target is None:
            diagnostics.append(
                Diagnostic(
                    DiagnosticKind.UNRESOLVED_ALIAS,
                    name,
                    f"Item `{name}` is an alias of `{item.alias}` "
                    "but this item doesn't exist.",
                )
            )
        elif name not in target.aliased:
            target.aliased.append(name)


def _compile_requires(store: ItemStore, diagnostics: list[Diagnostic]) -> None:
    """Infer missing requirement kinds and fill ``used_by`` on the targets."""
    for name, item in store.index.items():
        for req in item.requires:
            # Explicitly typed requirements are left as declared.
            if req.kind is not None:
                continue
            target = store.get(req.target)
            if target is None:
                diagnostics.append(
                    Diagnostic(
                        DiagnosticKind.UNRESOLVED_REQUIREMENT,
                        name,
                        f"Item `{name}` requires `{req.target}` "
                        "but this item doesn't exist.",
                    )
                )
                continue
            req.kind = target.kind
            edge = UsedBy(name=name, kind=item.kind)
            if edge not in target.used_by:
                target.used_by.append(edge)


def _raise_warnings(store: ItemStore, diagnostics: list[Diagnostic]) -> None:
    """Flag unknown type tags and malformed link URLs."""
    for name, item in store.index.items():
        for param in item.parameters:
            for tag in param.type:
                if not is_valid_type(tag):
                    diagnostics.append(
                        _type_diagnostic(
                            item,
                            f"Parameter `{param.name}` from item `{name}` is from "
                            f"type `{tag}` which is not a valid Sass type.",
                        )
                    )
        if item.returns is not None:
            for tag in item.returns.type:
                if not is_valid_type(tag):
                    diagnostics.append(
                        _type_diagnostic(
                            item,
                            f"Item `{name}` can return a `{tag}` which is not a "
                            "valid Sass type.",
                        )
                    )
        for tag in item.datatype:
            if not is_valid_type(tag):
                diagnostics.append(
                    _type_diagnostic(
                        item,
                        f"Variable `{name}` is from type `{tag}` which is not a "
                        "valid Sass type.",
                    )
                )
        for link in item.links:
            if not is_valid_url(link.url):
                diagnostics.append(
                    Diagnostic(
                        DiagnosticKind.INVALID_LINK_URL,
                        name,
                        f"Item `{name}` has a link leading to an invalid URL "
                        f"(`{link.url}`).",
                    )
                )


def _type_diagnostic(item: Item, message: str) -> Diagnostic:
    return Diagnostic(DiagnosticKind.INVALID_TYPE_TAG, item.name, message)
