# topmark:header:start
#
#   project      : DocTheme
#   file         : __init__.py
#   file_relpath : src/doctheme/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocTheme CLI subcommands."""
