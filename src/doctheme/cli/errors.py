# topmark:header:start
#
#   project      : DocTheme
#   file         : errors.py
#   file_relpath : src/doctheme/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the DocTheme CLI.

The core library lets `OSError`, `json.JSONDecodeError` and
`jinja2.TemplateError` propagate; commands translate them into these
exceptions so each failure class maps onto its own exit code.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from doctheme.cli.exit_codes import ExitCode


class DocthemeError(click.ClickException):
    """Base class for all DocTheme CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class DocthemeUsageError(DocthemeError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class DocthemeDataError(DocthemeError):
    """Error for documentation data that cannot be decoded."""

    exit_code = ExitCode.DATA_ERROR


class DocthemeConfigError(DocthemeError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class DocthemeFileNotFoundError(DocthemeError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class DocthemePermissionDeniedError(DocthemeError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class DocthemeIOError(DocthemeError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class DocthemeRenderError(DocthemeError):
    """Error for theme templates that fail to load or render."""

    exit_code = ExitCode.RENDER_ERROR


def os_error_to_cli(exc: OSError, *, action: str) -> DocthemeError:
    """Map an `OSError` onto the matching CLI error.

    Args:
        exc (OSError): The original error.
        action (str): What was being attempted, e.g. ``"read data file"``.

    Returns:
        DocthemeError: The CLI error to raise (``from exc``).
    """
    target: str = str(exc.filename) if exc.filename else ""
    message: str = f"Cannot {action}{f' {target}' if target else ''}: {exc.strerror or exc}"
    if isinstance(exc, FileNotFoundError):
        return DocthemeFileNotFoundError(message)
    if isinstance(exc, PermissionError):
        return DocthemePermissionDeniedError(message)
    return DocthemeIOError(message)
