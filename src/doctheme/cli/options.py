# topmark:header:start
#
#   project      : DocTheme
#   file         : options.py
#   file_relpath : src/doctheme/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reusable Click options for the DocTheme CLI.

The group-level options (``-v``/``-q``, ``--no-color``) are shared by every
invocation; ``--format`` is used by listing commands.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Final, ParamSpec, TypeVar

import click

from doctheme.cli.errors import DocthemeUsageError
from doctheme.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")

# Index = number of -v flags (capped); -q short-circuits to ERROR.
_VERBOSE_LEVELS: Final[tuple[int, ...]] = (
    logging.WARNING,
    logging.INFO,
    logging.DEBUG,
    TRACE_LEVEL,
)


class OutputFormat(str, Enum):
    """Output formats for listing commands."""

    TEXT = "text"
    JSON = "json"


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Map the ``-v``/``-q`` counts onto a logging level.

    ``-v`` gives INFO, ``-vv`` DEBUG and ``-vvv`` (or more) TRACE. Any ``-q``
    gives ERROR. Without either flag the level is WARNING.

    Args:
        verbose_count (int): Number of ``-v`` flags.
        quiet_count (int): Number of ``-q`` flags.

    Returns:
        int: The logging level.

    Raises:
        DocthemeUsageError: If both flags are given.
    """
    if verbose_count and quiet_count:
        raise DocthemeUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count:
        return logging.ERROR
    return _VERBOSE_LEVELS[min(verbose_count, len(_VERBOSE_LEVELS) - 1)]


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Show more diagnostics (-v info, -vv debug, -vvv trace).",
    )(f)
    return click.option("-q", "--quiet", count=True, help="Only report errors.")(f)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--no-color`` to a command."""
    return click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        default=False,
        help="Disable ANSI colors in output and logs.",
    )(f)


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--format text|json`` to a listing command."""
    return click.option(
        "--format",
        "output_format",
        type=click.Choice([fmt.value for fmt in OutputFormat]),
        default=OutputFormat.TEXT.value,
        show_default=True,
        help="Output format.",
    )(f)
