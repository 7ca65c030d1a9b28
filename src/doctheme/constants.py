# topmark:header:start
#
#   project      : DocTheme
#   file         : constants.py
#   file_relpath : src/doctheme/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocTheme Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from pathlib import Path

DOCTHEME_VERSION: str = get_version("doctheme")

# Bundled theme resources (views + assets) shipped inside the package.
THEME_DIR: Path = Path(__file__).parent / "theme"
VIEWS_DIR_NAME: str = "views"
ASSETS_DIR_NAME: str = "assets"

TEMPLATE_SUFFIX: str = ".html.j2"
OUTPUT_SUFFIX: str = ".html"

# The five top-level pages rendered by the theme, in render order.
TEMPLATE_NAMES: tuple[str, ...] = ("index", "grid", "theme", "view", "utils")

# Config file names, in same-directory merge order (later wins).
PYPROJECT_TOML_NAME: str = "pyproject.toml"
DOCTHEME_TOML_NAME: str = "doctheme.toml"
PYPROJECT_TOOL_SECTION: str = "tool.doctheme"

# Slug used for items that declare no group.
UNDEFINED_GROUP: str = "undefined"

LOG_LEVEL_ENV_VAR: str = "DOCTHEME_LOG_LEVEL"
