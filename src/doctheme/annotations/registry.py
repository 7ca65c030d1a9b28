# topmark:header:start
#
#   project      : DocTheme
#   file         : registry.py
#   file_relpath : src/doctheme/annotations/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Explicit registry of annotation parsers.

The documentation extractor looks annotations up by name in this registry.
The built-in annotations are registered on first use; plugins and tests may
register their own.

Typical usage:
    ```python
    from doctheme.annotations import AnnotationRegistry, apply_annotations

    names = AnnotationRegistry.names()  # ("file", "values")
    fields = apply_annotations("variable", {"values": ["left - Left edge"]})
    ```

Warning:
    Mutations operate on a registry shared across the process. In tests, wrap
    temporary registrations in try/finally to ensure cleanup.
"""

from __future__ import annotations

from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Iterator, Mapping

from doctheme.annotations.builtin import BUILTIN_ANNOTATIONS
from doctheme.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from doctheme.annotations.base import Annotation, AnnotationMeta
    from doctheme.config.logging import DocthemeLogger

logger: DocthemeLogger = get_logger(__name__)


class AnnotationRegistry:
    """Process-wide registry mapping annotation names to parser instances."""

    _lock = RLock()
    _entries: dict[str, Annotation] = {}
    _builtins_registered: bool = False

    @classmethod
    def register_builtin_annotations(cls) -> None:
        """Register the built-in annotations (idempotent)."""
        with cls._lock:
            if cls._builtins_registered:
                return
            for annotation_cls in BUILTIN_ANNOTATIONS:
                cls._entries.setdefault(annotation_cls.name, annotation_cls())
            cls._builtins_registered = True

    @classmethod
    def register(cls, annotation: Annotation) -> None:
        """Register an annotation parser under its name.

        Args:
            annotation (Annotation): The parser instance.

        Raises:
            ValueError: If the annotation has no name or the name is already taken.
        """
        if not annotation.name:
            raise ValueError(f"{annotation!r} has no name")
        with cls._lock:
            cls.register_builtin_annotations()
            if annotation.name in cls._entries:
                raise ValueError(f"Annotation '{annotation.name}' is already registered")
            cls._entries[annotation.name] = annotation
            logger.debug("Registered annotation '%s'", annotation.name)

    @classmethod
    def unregister(cls, name: str) -> bool:
        """Remove an annotation by name.

        Returns:
            bool: ``True`` if an annotation was removed.
        """
        with cls._lock:
            cls.register_builtin_annotations()
            return cls._entries.pop(name, None) is not None

    @classmethod
    def get(cls, name: str) -> Annotation | None:
        """Return the annotation registered under ``name``, or None."""
        with cls._lock:
            cls.register_builtin_annotations()
            return cls._entries.get(name)

    @classmethod
    def names(cls) -> tuple[str, ...]:
        """Return all registered annotation names (sorted)."""
        with cls._lock:
            cls.register_builtin_annotations()
            return tuple(sorted(cls._entries))

    @classmethod
    def as_mapping(cls) -> Mapping[str, Annotation]:
        """Return a read-only mapping of registered annotations."""
        with cls._lock:
            cls.register_builtin_annotations()
            return MappingProxyType(dict(cls._entries))

    @classmethod
    def iter_meta(cls) -> Iterator[AnnotationMeta]:
        """Iterate over descriptors of the registered annotations, sorted by name.

        Yields:
            AnnotationMeta: Serializable descriptor of each annotation.
        """
        for _name, annotation in sorted(cls.as_mapping().items()):
            yield annotation.meta()


def apply_annotations(
    item_type: str | None,
    occurrences: Mapping[str, Sequence[str]],
) -> dict[str, Any]:
    """Parse the raw annotation occurrences found on one item.

    Repeatable annotations accumulate their parsed values in order. For single
    annotations the last occurrence wins. Annotations not allowed on
    ``item_type`` are dropped. Both cases are logged as warnings.

    Args:
        item_type (str | None): Type of the documented item (e.g. ``"variable"``).
        occurrences (Mapping[str, Sequence[str]]): Raw texts per annotation name,
            in source order.

    Returns:
        dict[str, Any]: Parsed fields to attach to the item, keyed by annotation name.

    Raises:
        KeyError: If an annotation name is not registered.
    """
    fields: dict[str, Any] = {}
    for name, texts in occurrences.items():
        annotation: Annotation | None = AnnotationRegistry.get(name)
        if annotation is None:
            raise KeyError(f"Unknown annotation: '{name}'")
        if not texts:
            continue
        if not annotation.is_allowed_on(item_type):
            logger.warning(
                "Annotation '@%s' is not allowed on %s items; ignored", name, item_type
            )
            continue
        if annotation.multiple:
            fields[name] = [annotation.parse(text) for text in texts]
        else:
            if len(texts) > 1:
                logger.warning(
                    "Annotation '@%s' occurs %d times; keeping the last one", name, len(texts)
                )
            fields[name] = annotation.parse(texts[-1])
    return fields
