"""Tests for writing the partitioned output."""

import json
from pathlib import Path

import pytest

from scssdoc.models import Item, ItemKind
from scssdoc.partition_items import partition_items
from scssdoc.write_output import write_output


def test_write_json(tmp_path: Path) -> None:
    """Verify that JSON output holds serialized records."""
    data = partition_items([Item(name="m", kind=ItemKind.MIXIN, description="Mix")])
    out = tmp_path / "nested" / "data.json"
    write_output(data, out, indent=4)
    loaded = json.loads(out.read_text(encoding="utf-8"))
    assert loaded["mixins"] == [{"name": "m", "type": "mixin", "description": "Mix"}]
    assert loaded["functions"] == []


def test_unsupported_format(tmp_path: Path) -> None:
    """Verify that unknown formats are rejected."""
    with pytest.raises(ValueError, match="Unsupported output format"):
        write_output(partition_items([]), tmp_path / "x.xml", fmt="xml")
