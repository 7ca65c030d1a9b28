# topmark:header:start
#
#   project      : DocTheme
#   file         : test_data_input.py
#   file_relpath : tests/cli/test_data_input.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for decoding the documentation data given to `doctheme render`."""

from __future__ import annotations

import pytest

from doctheme.cli.errors import DocthemeDataError
from doctheme.cli.io import parse_data


def test_bare_list_is_wrapped() -> None:
    """A JSON list becomes the item list of an otherwise empty context."""
    assert parse_data('[{"name": "rem"}]') == {"data": [{"name": "rem"}]}


def test_null_sections_are_dropped() -> None:
    """Null ``display``/``groups`` are removed so lower layers still apply."""
    ctx = parse_data('{"display": null, "groups": null, "data": [], "package": null}')
    assert ctx == {"data": [], "package": None}


def test_explicit_sections_are_kept() -> None:
    """Non-null sections pass through unchanged."""
    ctx = parse_data('{"display": {"alias": true}, "groups": {}}')
    assert ctx == {"display": {"alias": True}, "groups": {}}


@pytest.mark.parametrize("text", ["{oops", "42", '{"data": {}}'])
def test_rejected_documents(text: str) -> None:
    """Invalid JSON, scalars and a non-list ``data`` are data errors."""
    with pytest.raises(DocthemeDataError):
        parse_data(text)
