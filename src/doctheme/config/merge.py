# topmark:header:start
#
#   project      : DocTheme
#   file         : merge.py
#   file_relpath : src/doctheme/config/merge.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Recursive, last-wins merge of configuration layers."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Return a new dict where values from ``override`` win over ``base``.

    Mappings present on both sides are merged key by key; any other value in
    ``override`` (lists included) replaces the value in ``base``. Neither input
    is mutated and the result shares no mutable state with them.

    Args:
        base (Mapping[str, Any]): Lower-precedence layer.
        override (Mapping[str, Any]): Higher-precedence layer.

    Returns:
        dict[str, Any]: The merged mapping.
    """
    merged: dict[str, Any] = {k: copy.deepcopy(v) for k, v in base.items()}
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged
