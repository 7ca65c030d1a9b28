# topmark:header:start
#
#   project      : DocTheme
#   file         : strategies_doctheme.py
#   file_relpath : tests/strategies_doctheme.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Hypothesis strategies for generating documentation items and contexts.

Items come in both accepted shapes: flat (``type``/``name``/``group: str``)
and SassDoc-style (``context.type``/``context.name``/``group: [str]``).
"""

from __future__ import annotations

from typing import Any

from hypothesis import strategies as st

ITEM_TYPES: tuple[str, ...] = ("function", "mixin", "variable", "placeholder")
GROUP_SLUGS: tuple[str, ...] = ("undefined", "grid", "Grid", "theme", "view", "utils")
ACCESS_LEVELS: tuple[str, ...] = ("public", "private")

s_names = st.text(alphabet="abcdefghijklmnopqrstuvwxyz-", min_size=1, max_size=12)


@st.composite
def s_item(draw: st.DrawFn) -> dict[str, Any]:
    """Draw a single documentation item."""
    kind: str = draw(st.sampled_from(ITEM_TYPES))
    name: str = draw(s_names)
    item: dict[str, Any] = {"access": draw(st.sampled_from(ACCESS_LEVELS))}

    if draw(st.booleans()):
        item["context"] = {"type": kind, "name": name}
        if draw(st.booleans()):
            # SassDoc @type annotation; never the item kind
            item["type"] = draw(st.sampled_from(("Number", "String", "Map")))
    else:
        item["type"] = kind
        item["name"] = name

    group_shape: str = draw(st.sampled_from(("none", "str", "list")))
    if group_shape == "str":
        item["group"] = draw(st.sampled_from(GROUP_SLUGS))
    elif group_shape == "list":
        item["group"] = draw(st.lists(st.sampled_from(GROUP_SLUGS), min_size=1, max_size=3))

    if draw(st.booleans()):
        item["alias"] = draw(s_names)
    return item


s_items = st.lists(s_item(), max_size=25)

s_groups = st.dictionaries(st.sampled_from(GROUP_SLUGS), s_names, max_size=4)
