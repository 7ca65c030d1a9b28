# topmark:header:start
#
#   project      : DocTheme
#   file         : items.py
#   file_relpath : src/doctheme/extras/items.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Accessors for documentation items.

Items are opaque mappings produced by the documentation extractor. Two shapes
are accepted: flat items (``{"name": ..., "type": ..., "group": "slug"}``) and
SassDoc-style items (``{"context": {"name": ..., "type": ...}, "group": ["slug"]}``).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from doctheme.config.keys import Ctx
from doctheme.constants import UNDEFINED_GROUP


def item_groups(item: Mapping[str, Any]) -> list[str]:
    """Return the group slugs of ``item``; items without a group are in ``undefined``."""
    group: Any = item.get(Ctx.GROUP)
    if isinstance(group, str) and group:
        return [group]
    if isinstance(group, (list, tuple)) and group:
        return [str(slug) for slug in group]
    return [UNDEFINED_GROUP]


def _context_field(item: Mapping[str, Any], key: str) -> Any:
    # A flat ``type`` on a SassDoc item is the @type annotation, not the item kind.
    context: Any = item.get(Ctx.CONTEXT)
    if isinstance(context, Mapping) and context.get(key) is not None:
        return context.get(key)
    return item.get(key)


def item_type(item: Mapping[str, Any]) -> str | None:
    """Return the item type (``function``, ``mixin``, ``variable``, ...), or None."""
    value: Any = _context_field(item, Ctx.TYPE)
    return str(value) if value is not None else None


def item_name(item: Mapping[str, Any]) -> str:
    """Return the item name, or an empty string."""
    value: Any = _context_field(item, Ctx.NAME)
    return str(value) if value is not None else ""
