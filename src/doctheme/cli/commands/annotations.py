# topmark:header:start
#
#   project      : DocTheme
#   file         : annotations.py
#   file_relpath : src/doctheme/cli/commands/annotations.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocTheme `annotations` and `parse-annotation` commands.

`annotations` lists the registered annotation descriptors. `parse-annotation`
runs one annotation parser over raw occurrence texts, applying the same
repeat/placement policy as a documentation build.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from doctheme.annotations.registry import AnnotationRegistry, apply_annotations
from doctheme.cli.errors import DocthemeUsageError
from doctheme.cli.options import OutputFormat, output_format_option

if TYPE_CHECKING:
    from doctheme.cli.console import ClickConsole


@click.command(
    name="annotations",
    help="List the custom annotations provided by the theme.",
)
@output_format_option
def annotations_command(*, output_format: str) -> None:
    """List the registered annotations.

    Args:
        output_format (str): ``text`` or ``json``.
    """
    console: ClickConsole = click.get_current_context().obj["console"]
    metas = list(AnnotationRegistry.iter_meta())

    if OutputFormat(output_format) == OutputFormat.JSON:
        console.print_json([meta.to_dict() for meta in metas])
        return

    for meta in metas:
        allowed: str = ", ".join(sorted(meta.allowed_on)) if meta.allowed_on else "any"
        repeat: str = "multiple" if meta.multiple else "single"
        console.print(f"{console.styled('@' + meta.name, bold=True)}  (on: {allowed}; {repeat})")


@click.command(
    name="parse-annotation",
    help="Parse raw annotation text(s) and print the result as JSON.",
)
@click.argument("name")
@click.argument("texts", nargs=-1, required=True)
@click.option(
    "--item-type",
    default=None,
    help="Type of the documented item (e.g. variable, mixin, function).",
)
def parse_annotation_command(*, name: str, texts: tuple[str, ...], item_type: str | None) -> None:
    """Parse one or more occurrences of annotation NAME.

    Args:
        name (str): Annotation name, with or without the leading ``@``.
        texts (tuple[str, ...]): Raw text of each occurrence, in source order.
        item_type (str | None): Type of the documented item.
    """
    console: ClickConsole = click.get_current_context().obj["console"]
    name = name.lstrip("@")
    if AnnotationRegistry.get(name) is None:
        known: str = ", ".join(AnnotationRegistry.names())
        raise DocthemeUsageError(f"Unknown annotation '{name}' (known: {known})")

    fields: dict[str, Any] = apply_annotations(item_type, {name: list(texts)})
    console.print_json(fields)
