# topmark:header:start
#
#   project      : DocTheme
#   file         : io.py
#   file_relpath : src/doctheme/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Read documentation data for the CLI.

The data file is the JSON output of the documentation extractor. It is either
a full context object (``{"data": [...], "package": {...}, "groups": {...}}``)
or a bare list of items, which is wrapped as ``{"data": [...]}``.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

from doctheme.cli.errors import DocthemeDataError, os_error_to_cli
from doctheme.config.keys import Ctx, Toml
from doctheme.config.logging import get_logger

logger = get_logger(__name__)


def read_data_text(source: str) -> str:
    """Return the text of ``source`` (``-`` reads STDIN)."""
    if source == "-":
        return sys.stdin.read()
    try:
        return Path(source).read_text(encoding="utf-8")
    except OSError as exc:
        raise os_error_to_cli(exc, action="read data file") from exc


def parse_data(text: str, *, source: str = "<data>") -> dict[str, Any]:
    """Decode the JSON documentation data into a context dict.

    Args:
        text (str): JSON document.
        source (str): Name used in error messages.

    Returns:
        dict[str, Any]: The raw documentation context.

    Raises:
        DocthemeDataError: If the text is not JSON, or not an object or list.
    """
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DocthemeDataError(f"Invalid JSON in {source}: {exc}") from exc

    if isinstance(data, list):
        return {Ctx.DATA: data}
    if isinstance(data, dict):
        if not isinstance(data.get(Ctx.DATA, []), list):
            raise DocthemeDataError(f"'{Ctx.DATA}' in {source} must be a list of items")
        for section in (Toml.SECTION_DISPLAY, Toml.SECTION_GROUPS):
            # A null section counts as unset.
            if section in data and data[section] is None:
                logger.debug("Ignoring null '%s' in %s", section, source)
                del data[section]
        return data
    raise DocthemeDataError(f"{source} must contain a JSON object or a list of items")


def load_data(source: str) -> dict[str, Any]:
    """Read and decode the documentation data from a file path or ``-``."""
    ctx: dict[str, Any] = parse_data(read_data_text(source), source=source)
    logger.debug("Loaded %d item(s) from %s", len(ctx.get(Ctx.DATA) or []), source)
    return ctx
