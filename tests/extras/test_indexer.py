# topmark:header:start
#
#   project      : DocTheme
#   file         : test_indexer.py
#   file_relpath : tests/extras/test_indexer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the group/type index."""

from __future__ import annotations

from collections import Counter
from typing import Any

from hypothesis import given

from doctheme.extras.indexer import by_group_and_type
from doctheme.extras.items import item_groups, item_name, item_type
from tests.strategies_doctheme import ITEM_TYPES, s_items


def test_index_shape(sample_items: list[dict[str, Any]]) -> None:
    """Items are bucketed by first group then type, preserving order."""
    index = by_group_and_type(sample_items)

    assert list(index) == ["grid", "utils", "undefined"]
    assert list(index["grid"]) == ["variable", "mixin"]
    assert [item_name(i) for i in index["grid"]["variable"]] == ["grid-columns", "grid-align"]
    assert [item_name(i) for i in index["grid"]["mixin"]] == ["grid-row", "row"]
    assert [item_name(i) for i in index["utils"]["function"]] == ["strip-unit"]
    assert [item_name(i) for i in index["undefined"]["function"]] == ["rem"]


def test_index_keeps_item_identity(sample_items: list[dict[str, Any]]) -> None:
    """Buckets hold the original item objects."""
    index = by_group_and_type(sample_items)
    assert index["grid"]["variable"][0] is sample_items[0]


def test_index_lowercases_group_and_defaults_type() -> None:
    """Group slugs are lowercased; items without a type go to ``unknown``."""
    index = by_group_and_type([{"group": "Grid", "type": "mixin"}, {"group": "grid"}])
    assert list(index) == ["grid"]
    assert list(index["grid"]) == ["mixin", "unknown"]


def test_item_type_and_name_accessors() -> None:
    """The SassDoc ``context`` block wins; flat fields are the fallback."""
    assert item_type({"context": {"type": "mixin"}}) == "mixin"
    assert item_type({"type": "Number", "context": {"type": "variable"}}) == "variable"
    assert item_type({"type": "function"}) == "function"
    assert item_type({"type": "function", "context": {"name": "rem"}}) == "function"
    assert item_name({"name": "alias", "context": {"name": "rem"}}) == "rem"
    assert item_type({}) is None
    assert item_name({"context": {"name": "rem"}}) == "rem"
    assert item_name({}) == ""


@given(s_items)
def test_index_is_a_total_partition(items: list[dict[str, Any]]) -> None:
    """Every item lands in exactly one bucket, matching its group and type."""
    index = by_group_and_type(items)

    bucketed: list[dict[str, Any]] = [
        item for types in index.values() for bucket in types.values() for item in bucket
    ]
    assert len(bucketed) == len(items)
    assert Counter(map(id, bucketed)) == Counter(map(id, items))

    assert {kind for types in index.values() for kind in types} <= set(ITEM_TYPES)

    for group, types in index.items():
        for kind, bucket in types.items():
            for item in bucket:
                assert item_groups(item)[0].lower() == group
                assert (item_type(item) or "unknown") == kind
            positions = [next(i for i, x in enumerate(items) if x is item) for item in bucket]
            assert positions == sorted(positions)
