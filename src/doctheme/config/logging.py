# topmark:header:start
#
#   project      : DocTheme
#   file         : logging.py
#   file_relpath : src/doctheme/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end
"""DocTheme logging: a TRACE level, chalk-coloured output and env overrides.

All DocTheme modules log through ``get_logger(__name__)``, which places them
under the ``doctheme`` logger. `setup_logging` configures only that logger;
the root logger is left untouched.

User-facing output never goes through these loggers; the CLI prints through
[`ClickConsole`][doctheme.cli.console.ClickConsole].

Levels, from most to least verbose: TRACE (5), DEBUG, INFO, WARNING, ERROR,
CRITICAL. ``DOCTHEME_LOG_LEVEL`` accepts any of these names or a number.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Callable, Final, cast

from yachalk import chalk

from doctheme.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

PACKAGE_LOGGER: Final[str] = "doctheme"

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"


class DocthemeLogger(logging.Logger):
    """Logger with a ``trace()`` method below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` with severity TRACE.

        Args:
            msg (object): The message to be logged.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Extra attributes for the log record.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(DocthemeLogger)


# Checked top-down: the first threshold the record reaches picks the colour.
_LEVEL_COLORS: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colours each record by severity.

    Args:
        fmt (str | None): Log format string.
        use_color (bool): Emit ANSI colours; plain text when False.
    """

    def __init__(self, fmt: str | None = None, *, use_color: bool = True) -> None:
        super().__init__(fmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and colour it according to its level."""
        message: str = super().format(record)
        if not self.use_color:
            return message
        for threshold, paint in _LEVEL_COLORS:
            if record.levelno >= threshold:
                return paint(message)
        return chalk.dim(message)


_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
}


def parse_log_level(value: str) -> int | None:
    """Parse a level name (any case) or a number; None if unrecognised."""
    text: str = value.strip().upper()
    if text.isdigit():
        return int(text)
    return _LEVEL_NAMES.get(text)


def resolve_env_log_level() -> int | None:
    """Return the level set through ``DOCTHEME_LOG_LEVEL``, or None if unset."""
    value: str | None = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not value:
        return None
    return parse_log_level(value)


def setup_logging(level: int | None = None, *, use_color: bool = True) -> None:
    """Attach a single stderr handler to the ``doctheme`` logger.

    Calling it again replaces the previous handler, so repeated CLI
    invocations in one process do not duplicate output.

    Args:
        level (int | None): Log level; ``DOCTHEME_LOG_LEVEL`` or CRITICAL when None.
        use_color (bool): Colour the output with chalk.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    package_logger: logging.Logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        ChalkFormatter(
            LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT,
            use_color=use_color,
        )
    )
    package_logger.addHandler(handler)


def get_logger(name: str) -> DocthemeLogger:
    """Return the `DocthemeLogger` called ``name`` (usually ``__name__``)."""
    return cast("DocthemeLogger", logging.getLogger(name))
