# topmark:header:start
#
#   project      : DocTheme
#   file         : markdown.py
#   file_relpath : src/doctheme/extras/markdown.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render descriptive text fields as Markdown into parallel ``html*`` fields.

For example ``package.description`` is rendered into
``package.htmlDescription`` and each item's ``deprecated`` text into
``htmlDeprecated``. Nested annotation entries (``parameter``, ``return``,
``example``, ``values``, ...) that carry a ``description`` get an
``htmlDescription`` next to it.

Rendering uses Python-Markdown with the ``extra`` and ``sane_lists`` extensions.
"""

from __future__ import annotations

from collections.abc import Callable, MutableMapping
from typing import Any

import markdown as markdown_lib

from doctheme.config.keys import Ctx
from doctheme.config.logging import get_logger

logger = get_logger(__name__)

MarkdownRenderer = Callable[[str], str]

# Top-level text fields of an item rendered to ``html<Field>``.
ITEM_TEXT_FIELDS: tuple[str, ...] = ("description", "deprecated", "output")

MARKDOWN_EXTENSIONS: tuple[str, ...] = ("extra", "sane_lists")


def html_field_name(field: str) -> str:
    """Return the rendered field name (``description`` → ``htmlDescription``)."""
    return f"html{field[:1].upper()}{field[1:]}"


def make_markdown_renderer() -> MarkdownRenderer:
    """Return a Markdown → HTML function backed by a fresh Python-Markdown instance."""
    md = markdown_lib.Markdown(extensions=list(MARKDOWN_EXTENSIONS))

    def render(text: str) -> str:
        html: str = md.reset().convert(text)
        return html

    return render


def _render_field(
    target: MutableMapping[str, Any],
    field: str,
    render: MarkdownRenderer,
) -> None:
    text: Any = target.get(field)
    if isinstance(text, str):
        target[html_field_name(field)] = render(text)


def _render_nested(value: Any, render: MarkdownRenderer) -> None:
    if isinstance(value, MutableMapping):
        _render_field(value, Ctx.DESCRIPTION, render)
    elif isinstance(value, list):
        for entry in value:
            if isinstance(entry, MutableMapping):
                _render_field(entry, Ctx.DESCRIPTION, render)


def render_markdown_fields(
    ctx: MutableMapping[str, Any],
    *,
    render: MarkdownRenderer | None = None,
) -> None:
    """Attach rendered ``html*`` fields to the package and every item of ``ctx``.

    Args:
        ctx (MutableMapping[str, Any]): Context with an optional ``package`` mapping
            and a ``data`` item list; updated in place.
        render (MarkdownRenderer | None): Markdown renderer; a Python-Markdown
            renderer is created when omitted.
    """
    render = render or make_markdown_renderer()

    package: Any = ctx.get(Ctx.PACKAGE)
    if isinstance(package, MutableMapping):
        _render_field(package, Ctx.DESCRIPTION, render)

    items: list[Any] = ctx.get(Ctx.DATA) or []
    for item in items:
        if not isinstance(item, MutableMapping):
            continue
        for field in ITEM_TEXT_FIELDS:
            _render_field(item, field, render)
        for key, value in list(item.items()):
            if key in ITEM_TEXT_FIELDS or key == Ctx.CONTEXT:
                continue
            _render_nested(value, render)
    logger.debug("Rendered Markdown fields for %d item(s)", len(items))
