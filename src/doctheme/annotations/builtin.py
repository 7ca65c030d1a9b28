# topmark:header:start
#
#   project      : DocTheme
#   file         : builtin.py
#   file_relpath : src/doctheme/annotations/builtin.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in annotations shipped with the theme.

``@values`` documents the accepted values of a variable, one occurrence per
value::

    /// @values left - Align to the left edge
    /// @values right - Align to the right edge
    /// @values center

``@file`` names the source file an item lives in::

    /// @file scss/_grid.scss
"""

from __future__ import annotations

from typing import ClassVar, TypedDict

from doctheme.annotations.base import Annotation


class ValueEntry(TypedDict):
    """Parsed ``@values`` occurrence."""

    value: str
    description: str | None


class ValuesAnnotation(Annotation):
    """``@values value - description`` (variables only, repeatable)."""

    name: ClassVar[str] = "values"
    allowed_on: ClassVar[frozenset[str] | None] = frozenset({"variable"})
    multiple: ClassVar[bool] = True

    def parse(self, text: str) -> ValueEntry:
        """Split ``text`` on the first ``-`` into a value and an optional description.

        Args:
            text (str): Raw annotation text, e.g. ``"left - Align to the left"``.

        Returns:
            ValueEntry: ``value`` is the trimmed left part (possibly empty);
                ``description`` is the trimmed right part, or ``None`` when there
                is no ``-`` or nothing follows it.
        """
        value, _, description = text.partition("-")
        return ValueEntry(value=value.strip(), description=description.strip() or None)


class FileAnnotation(Annotation):
    """``@file path`` (any item type, single)."""

    name: ClassVar[str] = "file"
    multiple: ClassVar[bool] = False

    def parse(self, text: str) -> str:
        """Return the file name unchanged."""
        return text


BUILTIN_ANNOTATIONS: tuple[type[Annotation], ...] = (ValuesAnnotation, FileAnnotation)
