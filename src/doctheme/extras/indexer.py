# topmark:header:start
#
#   project      : DocTheme
#   file         : indexer.py
#   file_relpath : src/doctheme/extras/indexer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Index documentation items by group and type.

The result has the following shape::

    {
      "group-slug": {
        "function": [...],
        "mixin": [...],
        "variable": [...]
      },
      "another-group": {...}
    }

Every item lands in exactly one bucket: its first group slug (lowercased) and
its type. Relative order is preserved within each bucket and buckets appear in
first-seen order.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from doctheme.extras.items import item_groups, item_type

UNKNOWN_TYPE: str = "unknown"

ByGroupAndType = dict[str, dict[str, list[Any]]]


def by_group_and_type(items: Iterable[Mapping[str, Any]]) -> ByGroupAndType:
    """Build the two-level group → type → items index.

    Args:
        items (Iterable[Mapping[str, Any]]): Flat, ordered documentation items.

    Returns:
        ByGroupAndType: The index; the items themselves are not copied.
    """
    index: ByGroupAndType = {}
    for item in items:
        group: str = item_groups(item)[0].lower()
        kind: str = item_type(item) or UNKNOWN_TYPE
        index.setdefault(group, {}).setdefault(kind, []).append(item)
    return index
