# topmark:header:start
#
#   project      : DocTheme
#   file         : __main__.py
#   file_relpath : src/doctheme/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running DocTheme via ``python -m doctheme``.

It delegates directly to :func:`doctheme.cli.main.cli`, so the module and the
``doctheme`` console script share a single entry point.

Examples:
    Render a documentation build::

        python -m doctheme render site/ --data sassdoc.json
"""

from __future__ import annotations

from doctheme.cli.main import cli

if __name__ == "__main__":
    cli()
