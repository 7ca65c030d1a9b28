# topmark:header:start
#
#   project      : DocTheme
#   file         : groups.py
#   file_relpath : src/doctheme/extras/groups.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve group slugs to display titles.

A docblock declares ``@group slug``; the theme configuration maps ``slug`` to
a title. Each item gets a ``groupName`` mapping ``{slug: title}``, falling back
to the slug itself when it is not configured. Items without a group belong to
the ``undefined`` group.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any

from doctheme.config.keys import Ctx, Toml
from doctheme.extras.items import item_groups


def group_title(slug: str, groups: Mapping[str, Any]) -> str:
    """Return the configured title of ``slug``, or the slug itself."""
    title: Any = groups.get(slug)
    return str(title) if title else slug


def apply_group_names(ctx: MutableMapping[str, Any]) -> None:
    """Set ``item["groupName"]`` on every item of ``ctx["data"]``."""
    groups: Mapping[str, Any] = ctx.get(Toml.SECTION_GROUPS) or {}
    for item in ctx.get(Ctx.DATA) or []:
        item[Ctx.GROUP_NAME] = {slug: group_title(slug, groups) for slug in item_groups(item)}
