# topmark:header:start
#
#   project      : DocTheme
#   file         : main.py
#   file_relpath : src/doctheme/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocTheme Click CLI.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj``; subcommands read the shared console from there.
"""

from __future__ import annotations

import click

from doctheme.annotations.registry import AnnotationRegistry
from doctheme.cli.commands.annotations import annotations_command, parse_annotation_command
from doctheme.cli.commands.config_defaults import config_defaults_command
from doctheme.cli.commands.render import render_command
from doctheme.cli.commands.version import version_command
from doctheme.cli.console import ClickConsole
from doctheme.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from doctheme.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)

AnnotationRegistry.register_builtin_annotations()


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (logging & console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    # DOCTHEME_LOG_LEVEL takes precedence over -v/-q
    level: int = resolve_env_log_level() or resolve_verbosity(verbose, quiet)
    ctx.obj["log_level"] = level
    setup_logging(level=level, use_color=not no_color)

    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)
    logger.debug("Log level %s, color %s", level, "off" if no_color else "on")


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="DocTheme CLI",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the DocTheme CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'doctheme render DEST --data sassdoc.json' to build the docs.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(render_command)

cli.add_command(annotations_command)

cli.add_command(parse_annotation_command)

cli.add_command(config_defaults_command)

if __name__ == "__main__":
    cli()
