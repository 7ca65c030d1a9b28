# topmark:header:start
#
#   project      : DocTheme
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the DocTheme test suite.

Provides sample documentation data shared across the suite and keeps the
process-wide state (log level environment, annotation registry) isolated
between tests.
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any

import pytest

from doctheme.annotations.registry import AnnotationRegistry
from doctheme.config import logging

if TYPE_CHECKING:
    from collections.abc import Iterator

SAMPLE_ITEMS: list[dict[str, Any]] = [
    {
        "description": "Number of columns in the grid.",
        "context": {"type": "variable", "name": "grid-columns", "value": "12"},
        "group": ["grid"],
        "access": "public",
        "type": "Number",
    },
    {
        "description": "Horizontal alignment of a row.",
        "context": {"type": "variable", "name": "grid-align", "value": "left"},
        "group": ["grid"],
        "access": "public",
        "values": [
            {"value": "left", "description": "Align to the *left* edge"},
            {"value": "center", "description": None},
        ],
        "file": "scss/_grid.scss",
    },
    {
        "description": "Builds a grid row.",
        "context": {"type": "mixin", "name": "grid-row"},
        "group": ["grid"],
        "access": "public",
        "parameter": [{"type": "Number", "name": "gutter", "description": "Gutter *width*"}],
    },
    {
        "description": "Internal helper.",
        "context": {"type": "function", "name": "strip-unit"},
        "group": ["utils"],
        "access": "private",
        "return": {"type": "Number", "description": "Unitless number"},
    },
    {
        "description": "Old name of `grid-row`.",
        "context": {"type": "mixin", "name": "row"},
        "group": ["grid"],
        "access": "public",
        "alias": "grid-row",
        "deprecated": "Use `grid-row` instead.",
    },
    {
        "context": {"type": "function", "name": "rem"},
        "access": "public",
    },
]


@pytest.fixture(autouse=True)
def silence_doctheme_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure DocTheme's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
    """
    monkeypatch.delenv("DOCTHEME_LOG_LEVEL", raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:
    """Log at TRACE level so failing tests carry full diagnostics."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def sample_items() -> list[dict[str, Any]]:
    """Return a fresh copy of the sample documentation items."""
    return copy.deepcopy(SAMPLE_ITEMS)


@pytest.fixture
def sample_context(sample_items: list[dict[str, Any]]) -> dict[str, Any]:
    """Return a raw documentation context built around the sample items."""
    return {
        "package": {
            "title": "Gridlock",
            "name": "gridlock",
            "version": "1.2.0",
            "description": "A *tiny* grid framework.",
        },
        "groups": {"grid": "Grid system"},
        "data": sample_items,
    }


@pytest.fixture
def clean_registry() -> Iterator[None]:
    """Restore the annotation registry after a test mutates it."""
    AnnotationRegistry.register_builtin_annotations()
    saved = dict(AnnotationRegistry.as_mapping())
    try:
        yield
    finally:
        with AnnotationRegistry._lock:
            AnnotationRegistry._entries.clear()
            AnnotationRegistry._entries.update(saved)
