# topmark:header:start
#
#   project      : DocTheme
#   file         : engine.py
#   file_relpath : src/doctheme/rendering/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Jinja2 environment and partials configuration for the theme views.

Every page template receives the same partials mapping and pulls its
fragments in with ``{% include partials.head %}``. ``navigation`` is an
alias of the ``header`` partial.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from doctheme.extras.groups import group_title
from doctheme.extras.items import item_name, item_type

if TYPE_CHECKING:
    from pathlib import Path

PARTIALS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "head": "includes/head.html.j2",
        "header": "includes/header.html.j2",
        "navigation": "includes/header.html.j2",
        "item": "includes/item.html.j2",
        "footer": "includes/footer.html.j2",
    }
)


def partials_config() -> dict[str, dict[str, str]]:
    """Return a fresh copy of the partials configuration for one render."""
    return {"partials": dict(PARTIALS)}


def _group_title_filter(slug: str, groups: Mapping[str, Any] | None = None) -> str:
    return group_title(slug, groups or {})


def create_environment(views_dir: Path, *, strict: bool = False) -> Environment:
    """Create the Jinja2 environment used to render the theme views.

    Args:
        views_dir (Path): Directory holding the page templates and ``includes/``.
        strict (bool): Fail on undefined variables instead of rendering them empty.

    Returns:
        Environment: A configured environment with HTML autoescaping and the
            ``item_name``, ``item_type`` and ``group_title`` filters.
    """
    options: dict[str, Any] = {}
    if strict:
        options["undefined"] = StrictUndefined
    env = Environment(
        loader=FileSystemLoader(str(views_dir)),
        autoescape=select_autoescape(enabled_extensions=("html", "j2"), default=True),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        **options,
    )
    env.filters["item_name"] = item_name
    env.filters["item_type"] = item_type
    env.filters["group_title"] = _group_title_filter
    return env
