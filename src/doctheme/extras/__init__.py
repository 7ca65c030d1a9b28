# topmark:header:start
#
#   project      : DocTheme
#   file         : __init__.py
#   file_relpath : src/doctheme/extras/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Context helpers used while preparing a documentation build."""

from __future__ import annotations

from doctheme.extras.display import apply_display_flags, is_displayed
from doctheme.extras.groups import apply_group_names, group_title
from doctheme.extras.indexer import by_group_and_type
from doctheme.extras.items import item_groups, item_name, item_type
from doctheme.extras.markdown import html_field_name, make_markdown_renderer, render_markdown_fields

__all__ = [
    "apply_display_flags",
    "apply_group_names",
    "by_group_and_type",
    "group_title",
    "html_field_name",
    "is_displayed",
    "item_groups",
    "item_name",
    "item_type",
    "make_markdown_renderer",
    "render_markdown_fields",
]
