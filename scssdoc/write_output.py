"""Logic for writing the partitioned item mapping to disk."""

import json
from pathlib import Path
from typing import Any

import yaml

from scssdoc.item_to_dict import partition_to_dict
from scssdoc.models import Item

OUTPUT_FORMATS = ("json", "yaml")


def write_output(
    data: dict[str, list[Item]], path: Path, fmt: str = "json", indent: int = 2
) -> None:
    """Serialize the items and write them as JSON or YAML."""
    if fmt not in OUTPUT_FORMATS:
        msg = f"Unsupported output format: {fmt}"
        raise ValueError(msg)

    payload: dict[str, Any] = partition_to_dict(data)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        if fmt == "yaml":
            yaml.safe_dump(
                payload, f, indent=indent, sort_keys=False, allow_unicode=True
            )
        else:
            json.dump(payload, f, indent=indent, ensure_ascii=False)
            f.write("\n")
