# topmark:header:start
#
#   project      : DocTheme
#   file         : display.py
#   file_relpath : src/doctheme/extras/display.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-item ``display`` flag derived from the display configuration.

An item is displayed when its access level is listed in ``display.access`` and
it is either not an alias or ``display.alias`` is enabled. Items without an
``access`` field are treated as ``public``.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any

from doctheme.config.keys import Ctx, Toml

DEFAULT_ACCESS: str = "public"


def is_displayed(item: Mapping[str, Any], display: Mapping[str, Any]) -> bool:
    """Return whether ``item`` should be rendered under ``display``.

    Args:
        item (Mapping[str, Any]): Documentation item.
        display (Mapping[str, Any]): The ``display`` configuration.

    Returns:
        bool: The display decision.
    """
    access: Any = item.get(Ctx.ACCESS) or DEFAULT_ACCESS
    allowed: Any = display.get(Toml.KEY_ACCESS) or ()
    if access not in allowed:
        return False
    return not item.get(Ctx.ALIAS) or bool(display.get(Toml.KEY_ALIAS))


def apply_display_flags(ctx: MutableMapping[str, Any]) -> None:
    """Set ``item["display"]`` on every item of ``ctx["data"]``."""
    display: Mapping[str, Any] = ctx.get(Toml.SECTION_DISPLAY) or {}
    for item in ctx.get(Ctx.DATA) or []:
        item[Ctx.DISPLAY] = is_displayed(item, display)
