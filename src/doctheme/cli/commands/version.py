# topmark:header:start
#
#   project      : DocTheme
#   file         : version.py
#   file_relpath : src/doctheme/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocTheme `version` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from doctheme.constants import DOCTHEME_VERSION

if TYPE_CHECKING:
    from doctheme.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of DocTheme.",
)
def version_command() -> None:
    """Print the DocTheme version installed in the current environment."""
    console: ClickConsole = click.get_current_context().obj["console"]
    console.print(console.styled(DOCTHEME_VERSION, bold=True))
