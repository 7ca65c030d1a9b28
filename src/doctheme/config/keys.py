# topmark:header:start
#
#   project      : DocTheme
#   file         : keys.py
#   file_relpath : src/doctheme/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical key names for DocTheme configuration and documentation contexts.

The same names are used in ``doctheme.toml`` / ``[tool.doctheme]`` and in the
context object handed to the theme, so a TOML config can be merged straight
into a context.

Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by DocTheme configuration."""

    # [display]
    SECTION_DISPLAY: Final[str] = "display"

    KEY_ACCESS: Final[str] = "access"
    KEY_ALIAS: Final[str] = "alias"
    KEY_WATERMARK: Final[str] = "watermark"

    # [groups]
    SECTION_GROUPS: Final[str] = "groups"


class Ctx:
    """Keys of the documentation context and of its items."""

    DATA: Final[str] = "data"
    RAW_DATA: Final[str] = "_data"
    BY_GROUP_AND_TYPE: Final[str] = "byGroupAndType"
    PACKAGE: Final[str] = "package"

    # Item fields
    GROUP: Final[str] = "group"
    GROUP_NAME: Final[str] = "groupName"
    TYPE: Final[str] = "type"
    NAME: Final[str] = "name"
    CONTEXT: Final[str] = "context"
    ACCESS: Final[str] = "access"
    ALIAS: Final[str] = "alias"
    DISPLAY: Final[str] = "display"
    DESCRIPTION: Final[str] = "description"
