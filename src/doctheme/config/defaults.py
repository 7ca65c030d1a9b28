# topmark:header:start
#
#   project      : DocTheme
#   file         : defaults.py
#   file_relpath : src/doctheme/config/defaults.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in defaults for the theme's display and group settings."""

from __future__ import annotations

from typing import Any

from doctheme.config.keys import Toml
from doctheme.constants import UNDEFINED_GROUP


def load_defaults_dict() -> dict[str, Any]:
    """Return DocTheme's runtime defaults as a Python dict.

    This function performs no I/O. The returned value is a new dict on each
    call, so callers (and concurrent builds) can mutate it safely.

    Returns:
        dict[str, Any]: The ``display`` and ``groups`` defaults.
    """
    return {
        Toml.SECTION_DISPLAY: {
            Toml.KEY_ACCESS: ["public", "private"],
            Toml.KEY_ALIAS: False,
            Toml.KEY_WATERMARK: True,
        },
        Toml.SECTION_GROUPS: {
            UNDEFINED_GROUP: "General",
        },
    }
