"""Conversion of items into plain records for the renderer."""

from typing import Any

from scssdoc.models import Item


def item_to_dict(item: Item) -> dict[str, Any]:
    """Convert an item to a JSON/YAML friendly mapping, omitting empty fields."""
    out: dict[str, Any] = {
        "name": item.name,
        "type": item.kind.value if item.kind else None,
    }
    if item.description is not None:
        out["description"] = item.description
    if item.parameters:
        out["parameters"] = [
            {
                "type": list(p.type),
                "name": p.name,
                "defaultValue": p.default_value,
                "description": p.description,
            }
            for p in item.parameters
        ]
    if item.returns is not None:
        out["returns"] = {
            "type": list(item.returns.type),
            "description": item.returns.description,
        }
    if item.requires:
        out["requires"] = [
            {"item": r.target, "type": r.kind.value if r.kind else None}
            for r in item.requires
        ]
    if item.links:
        out["links"] = [{"url": ln.url, "label": ln.label} for ln in item.links]
    if item.aliased:
        out["aliased"] = list(item.aliased)
    if item.used_by:
        out["usedBy"] = [
            {"item": u.name, "type": u.kind.value if u.kind else None}
            for u in item.used_by
        ]
    if item.datatype:
        out["datatype"] = list(item.datatype)
    for key in ("alias", "access", "value", "deprecated", "since", "author"):
        value = getattr(item, key)
        if value is not None:
            out[key] = value
    for key in ("throws", "todo"):
        values = getattr(item, key)
        if values:
            out[key] = list(values)
    return out


def partition_to_dict(data: dict[str, list[Item]]) -> dict[str, list[dict[str, Any]]]:
    """Serialize every category of a partitioned item mapping."""
    return {key: [item_to_dict(it) for it in items] for key, items in data.items()}
