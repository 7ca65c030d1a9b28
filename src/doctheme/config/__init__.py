# topmark:header:start
#
#   project      : DocTheme
#   file         : __init__.py
#   file_relpath : src/doctheme/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration layer for DocTheme.

Defaults are produced fresh on each call by
[`load_defaults_dict`][doctheme.config.defaults.load_defaults_dict] and combined
with user layers through the pure
[`deep_merge`][doctheme.config.merge.deep_merge]; no module-level mutable state
is shared between builds.
"""

from __future__ import annotations

from doctheme.config.defaults import load_defaults_dict
from doctheme.config.io import (
    discover_config_files,
    load_merged_config,
    load_theme_config,
    load_toml_dict,
    render_defaults_toml,
)
from doctheme.config.merge import deep_merge

__all__ = [
    "deep_merge",
    "discover_config_files",
    "load_defaults_dict",
    "load_merged_config",
    "load_theme_config",
    "load_toml_dict",
    "render_defaults_toml",
]
