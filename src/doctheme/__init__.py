# topmark:header:start
#
#   project      : DocTheme
#   file         : __init__.py
#   file_relpath : src/doctheme/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocTheme package.

DocTheme renders a static HTML documentation theme from a documentation data
set. It prepares the data (default display/group settings, Markdown rendering,
display flags, group names, group/type index), renders a fixed set of Jinja2
templates and copies the bundled assets. It also provides the custom
``values`` and ``file`` annotation parsers.
"""

from __future__ import annotations
