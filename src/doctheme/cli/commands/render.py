# topmark:header:start
#
#   project      : DocTheme
#   file         : render.py
#   file_relpath : src/doctheme/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocTheme `render` command.

Reads the documentation data produced by the extractor, merges the theme
configuration layers under it and renders the theme into DEST.

Configuration precedence (lowest → highest): built-in defaults,
``pyproject.toml`` / ``doctheme.toml`` in the current directory, ``--config``
files, then the ``display``/``groups`` carried by the data file itself.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click
from jinja2 import TemplateError

from doctheme.cli.errors import DocthemeConfigError, DocthemeRenderError, os_error_to_cli
from doctheme.cli.io import load_data
from doctheme.config.io import load_merged_config
from doctheme.config.logging import get_logger
from doctheme.config.merge import deep_merge
from doctheme.theme import render

if TYPE_CHECKING:
    from doctheme.cli.console import ClickConsole
    from doctheme.rendering.renderer import RenderResult

logger = get_logger(__name__)


@click.command(
    name="render",
    help="Render the documentation theme into DEST.",
)
@click.argument("dest", type=click.Path(file_okay=False, path_type=Path))
@click.option(
    "--data",
    "data_source",
    required=True,
    type=str,
    help="JSON documentation data file (use '-' for STDIN).",
)
@click.option(
    "--config",
    "config_files",
    multiple=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Extra TOML config file(s), merged after the discovered ones.",
)
@click.option(
    "--no-config",
    is_flag=True,
    default=False,
    help="Do not read pyproject.toml / doctheme.toml from the current directory.",
)
@click.option(
    "--jobs",
    "-j",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of pages rendered concurrently.",
)
@click.option(
    "--theme-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Render with an alternative theme directory (views/ + assets/).",
)
def render_command(
    *,
    dest: Path,
    data_source: str,
    config_files: tuple[Path, ...],
    no_config: bool,
    jobs: int,
    theme_dir: Path | None,
) -> None:
    """Render the documentation theme into DEST.

    Args:
        dest (Path): Output directory.
        data_source (str): Path of the JSON data file, or ``-`` for STDIN.
        config_files (tuple[Path, ...]): Explicit TOML config files.
        no_config (bool): Skip config discovery in the current directory.
        jobs (int): Number of pages rendered concurrently.
        theme_dir (Path | None): Alternative theme directory.
    """
    click_ctx = click.get_current_context()
    console: ClickConsole = click_ctx.obj["console"]

    for config_file in config_files:
        if not config_file.is_file():
            raise DocthemeConfigError(f"Config file not found: {config_file}")

    config: dict[str, Any] = load_merged_config(
        extra_config_files=config_files,
        no_config=no_config,
    )
    context: dict[str, Any] = deep_merge(config, load_data(data_source))

    try:
        result: RenderResult = render(dest, context, jobs=jobs, theme_dir=theme_dir)
    except TemplateError as exc:
        raise DocthemeRenderError(f"Theme template error: {exc}") from exc
    except OSError as exc:
        raise os_error_to_cli(exc, action="render into") from exc

    console.print(
        console.styled(f"Rendered {len(result.pages)} page(s) into {result.dest}", fg="green")
    )
