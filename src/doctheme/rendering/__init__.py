# topmark:header:start
#
#   project      : DocTheme
#   file         : __init__.py
#   file_relpath : src/doctheme/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Template rendering for the documentation theme."""

from __future__ import annotations

from doctheme.rendering.engine import PARTIALS, create_environment, partials_config
from doctheme.rendering.renderer import RenderResult, ThemeRenderer

__all__ = [
    "PARTIALS",
    "RenderResult",
    "ThemeRenderer",
    "create_environment",
    "partials_config",
]
