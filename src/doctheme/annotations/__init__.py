# topmark:header:start
#
#   project      : DocTheme
#   file         : __init__.py
#   file_relpath : src/doctheme/annotations/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom documentation-comment annotations (``@values``, ``@file``)."""

from __future__ import annotations

from doctheme.annotations.base import Annotation, AnnotationMeta
from doctheme.annotations.builtin import FileAnnotation, ValueEntry, ValuesAnnotation
from doctheme.annotations.registry import AnnotationRegistry, apply_annotations

__all__ = [
    "Annotation",
    "AnnotationMeta",
    "AnnotationRegistry",
    "FileAnnotation",
    "ValueEntry",
    "ValuesAnnotation",
    "apply_annotations",
]
