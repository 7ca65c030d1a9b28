# topmark:header:start
#
#   project      : DocTheme
#   file         : test_builtin.py
#   file_relpath : tests/annotations/test_builtin.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the built-in ``@values`` and ``@file`` annotation parsers."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from doctheme.annotations import FileAnnotation, ValuesAnnotation


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("foo - bar baz", {"value": "foo", "description": "bar baz"}),
        ("foo", {"value": "foo", "description": None}),
        (" - only desc", {"value": "", "description": "only desc"}),
        ("foo -   ", {"value": "foo", "description": None}),
        ("  padded  ", {"value": "padded", "description": None}),
        ("a - b - c", {"value": "a", "description": "b - c"}),
        ("", {"value": "", "description": None}),
    ],
)
def test_values_parse(text: str, expected: dict[str, str | None]) -> None:
    """``@values`` splits on the first dash and trims both parts."""
    assert ValuesAnnotation().parse(text) == expected


def test_values_descriptor() -> None:
    """``@values`` is repeatable and only allowed on variables."""
    meta = ValuesAnnotation().meta()
    assert meta.name == "values"
    assert meta.multiple is True
    assert meta.allowed_on == frozenset({"variable"})
    assert meta.to_dict() == {"name": "values", "multiple": True, "allowedOn": ["variable"]}


@given(st.text())
def test_file_parse_is_identity(text: str) -> None:
    """``@file`` returns its input unchanged for any string."""
    assert FileAnnotation().parse(text) == text


def test_file_descriptor() -> None:
    """``@file`` is single and allowed on any item type."""
    annotation = FileAnnotation()
    assert annotation.parse("path/to/file.scss") == "path/to/file.scss"
    assert annotation.meta().to_dict() == {"name": "file", "multiple": False}
    assert annotation.is_allowed_on("mixin")
    assert annotation.is_allowed_on(None)


def test_values_not_allowed_on_mixins() -> None:
    """Placement is checked against the item type."""
    annotation = ValuesAnnotation()
    assert annotation.is_allowed_on("variable")
    assert not annotation.is_allowed_on("mixin")
