# topmark:header:start
#
#   project      : DocTheme
#   file         : config_defaults.py
#   file_relpath : src/doctheme/cli/commands/config_defaults.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocTheme `config-defaults` command.

Prints the built-in display/group defaults as TOML, ready to paste into
``doctheme.toml`` or (with ``--pyproject``) into ``pyproject.toml``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from doctheme.config.io import render_defaults_toml

if TYPE_CHECKING:
    from doctheme.cli.console import ClickConsole


@click.command(
    name="config-defaults",
    help="Show the built-in theme configuration as TOML.",
)
@click.option(
    "--pyproject",
    "for_pyproject",
    is_flag=True,
    default=False,
    help="Nest the output under [tool.doctheme] for pyproject.toml.",
)
def config_defaults_command(*, for_pyproject: bool) -> None:
    """Show the built-in theme configuration as TOML."""
    console: ClickConsole = click.get_current_context().obj["console"]
    console.print(render_defaults_toml(for_pyproject=for_pyproject), nl=False)
