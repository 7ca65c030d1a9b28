# topmark:header:start
#
#   project      : DocTheme
#   file         : test_merge.py
#   file_relpath : tests/config/test_merge.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the recursive configuration merge and the built-in defaults."""

from __future__ import annotations

from typing import Any

from doctheme.config.defaults import load_defaults_dict
from doctheme.config.merge import deep_merge


def test_defaults_shape() -> None:
    """The built-in defaults match the documented display/groups values."""
    assert load_defaults_dict() == {
        "display": {"access": ["public", "private"], "alias": False, "watermark": True},
        "groups": {"undefined": "General"},
    }


def test_defaults_are_fresh_on_each_call() -> None:
    """Mutating one defaults dict never leaks into the next build."""
    first: dict[str, Any] = load_defaults_dict()
    first["display"]["access"].append("protected")
    first["groups"]["undefined"] = "Misc"

    second: dict[str, Any] = load_defaults_dict()
    assert second["display"]["access"] == ["public", "private"]
    assert second["groups"]["undefined"] == "General"


def test_deep_merge_override_wins_per_nested_key() -> None:
    """Nested mappings merge key-wise; the override wins on shared keys."""
    base = {"display": {"alias": False, "watermark": True}, "groups": {"undefined": "General"}}
    override = {"display": {"alias": True}, "groups": {"grid": "Grid"}}

    merged = deep_merge(base, override)

    assert merged == {
        "display": {"alias": True, "watermark": True},
        "groups": {"undefined": "General", "grid": "Grid"},
    }


def test_deep_merge_replaces_lists() -> None:
    """Lists are replaced, not concatenated."""
    merged = deep_merge({"access": ["public", "private"]}, {"access": ["public"]})
    assert merged == {"access": ["public"]}


def test_deep_merge_does_not_mutate_inputs() -> None:
    """Neither input is modified and the result shares no nested state."""
    base = {"display": {"access": ["public"]}}
    override = {"display": {"alias": True}}

    merged = deep_merge(base, override)
    merged["display"]["access"].append("private")

    assert base == {"display": {"access": ["public"]}}
    assert override == {"display": {"alias": True}}


def test_deep_merge_scalar_replaces_mapping() -> None:
    """A non-mapping override replaces a mapping in the base."""
    assert deep_merge({"groups": {"a": "A"}}, {"groups": None}) == {"groups": None}
