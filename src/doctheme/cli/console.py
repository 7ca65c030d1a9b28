# topmark:header:start
#
#   project      : DocTheme
#   file         : console.py
#   file_relpath : src/doctheme/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""User-facing console output for the CLI.

Command results and error messages are printed here. Diagnostics go through
`doctheme.config.logging`, which writes to stderr independently.
"""

from __future__ import annotations

import json
import sys
from typing import Any, TextIO

import click


class ClickConsole:
    """Write program output through `click.echo`.

    Args:
        enable_color (bool): Keep ANSI styling; stripped when False.
        out (TextIO | None): Output stream (`sys.stdout` when None).
        err (TextIO | None): Error stream (`sys.stderr` when None).
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out
        self.err = err

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write ``text`` to the output stream."""
        click.echo(text, file=self.out or sys.stdout, nl=nl, color=self.enable_color)

    def print_json(self, data: Any) -> None:
        """Write ``data`` as indented JSON to the output stream."""
        self.print(json.dumps(data, indent=2))

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write ``text`` to the error stream."""
        click.echo(text, file=self.err or sys.stderr, nl=nl, color=self.enable_color)

    def styled(self, text: str, **style: Any) -> str:
        """Return ``text`` with `click.style` applied when colour is enabled."""
        if not self.enable_color:
            return text
        return click.style(text, **style)
