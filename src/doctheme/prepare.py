# topmark:header:start
#
#   project      : DocTheme
#   file         : prepare.py
#   file_relpath : src/doctheme/prepare.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Prepare a documentation context for the theme templates.

Steps, in order:
    1. Merge the ``display``/``groups`` defaults under the caller's values.
    2. Render descriptive text as Markdown into ``html*`` fields.
    3. Compute each item's ``display`` flag.
    4. Resolve each item's group slugs to titles (``groupName``).
    5. Index the items by group and type (``byGroupAndType``).
    6. Expose the flat item list as ``_data``; the prepared context has no ``data`` key.

The input context is never mutated: it is deep-copied first and a new dict is
returned, so one context can feed several builds.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from doctheme.config.defaults import load_defaults_dict
from doctheme.config.keys import Ctx, Toml
from doctheme.config.logging import get_logger
from doctheme.config.merge import deep_merge
from doctheme.extras.display import apply_display_flags
from doctheme.extras.groups import apply_group_names
from doctheme.extras.indexer import by_group_and_type
from doctheme.extras.markdown import render_markdown_fields

if TYPE_CHECKING:
    from doctheme.config.logging import DocthemeLogger
    from doctheme.extras.markdown import MarkdownRenderer

logger: DocthemeLogger = get_logger(__name__)


def merge_defaults(
    ctx: Mapping[str, Any],
    defaults: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Return ``ctx`` with ``display`` and ``groups`` merged over the defaults.

    Caller values win at every nested key; sections the caller omitted are
    filled in entirely from the defaults.

    Args:
        ctx (Mapping[str, Any]): Caller-supplied context.
        defaults (Mapping[str, Any] | None): Defaults to apply; the built-in
            defaults when omitted.

    Returns:
        dict[str, Any]: A new context dict.
    """
    base: Mapping[str, Any] = defaults if defaults is not None else load_defaults_dict()
    merged: dict[str, Any] = deep_merge({}, ctx)
    for section in (Toml.SECTION_DISPLAY, Toml.SECTION_GROUPS):
        user_section: Any = merged.get(section)
        if isinstance(user_section, Mapping):
            merged[section] = deep_merge(base.get(section, {}), user_section)
        elif user_section is None:
            merged.pop(section, None)
    # Top-level pass: guarantees both sections exist.
    return deep_merge(base, merged)


def prepare_context(
    ctx: Mapping[str, Any],
    *,
    defaults: Mapping[str, Any] | None = None,
    markdown: MarkdownRenderer | None = None,
) -> dict[str, Any]:
    """Return a fully prepared context ready for templating.

    Args:
        ctx (Mapping[str, Any]): Raw documentation context (``display``,
            ``groups``, ``data``, optional ``package``...).
        defaults (Mapping[str, Any] | None): Display/group defaults; the built-in
            defaults when omitted.
        markdown (MarkdownRenderer | None): Markdown renderer override.

    Returns:
        dict[str, Any]: The prepared context, with ``_data`` and
            ``byGroupAndType`` and without ``data``.
    """
    work: dict[str, Any] = merge_defaults(ctx, defaults)
    work[Ctx.DATA] = list(work.get(Ctx.DATA) or [])

    render_markdown_fields(work, render=markdown)
    apply_display_flags(work)
    apply_group_names(work)

    items: list[Any] = work.pop(Ctx.DATA)
    index = by_group_and_type(items)
    logger.debug("Indexed %d item(s) into %d group(s)", len(items), len(index))

    stale: tuple[str, ...] = (Ctx.RAW_DATA, Ctx.BY_GROUP_AND_TYPE)
    prepared: dict[str, Any] = {key: value for key, value in work.items() if key not in stale}
    prepared[Ctx.RAW_DATA] = items
    prepared[Ctx.BY_GROUP_AND_TYPE] = index
    return prepared
