# topmark:header:start
#
#   project      : DocTheme
#   file         : base.py
#   file_relpath : src/doctheme/annotations/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class and descriptor for custom documentation-comment annotations.

An annotation is a tag such as ``@values`` or ``@file`` found in a
documentation comment. Each annotation class declares its ``name``, the item
types it is ``allowed_on`` (``None`` means any type), whether it may occur
``multiple`` times per item, and a stateless `parse` that turns the raw text
of one occurrence into structured data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar


@dataclass(frozen=True)
class AnnotationMeta:
    """Stable, serializable descriptor of a registered annotation.

    Attributes:
        name: Annotation tag name (without the ``@``).
        allowed_on: Item types the annotation may be attached to, or ``None``
            when it is allowed on any item.
        multiple: Whether the annotation may occur more than once per item.
    """

    name: str
    allowed_on: frozenset[str] | None
    multiple: bool

    def to_dict(self) -> dict[str, Any]:
        """Return the descriptor in the extraction tool's key convention."""
        data: dict[str, Any] = {"name": self.name, "multiple": self.multiple}
        if self.allowed_on is not None:
            data["allowedOn"] = sorted(self.allowed_on)
        return data


class Annotation:
    """Base class for annotation parsers.

    Subclasses set the class attributes and implement `parse`.
    """

    name: ClassVar[str] = ""
    allowed_on: ClassVar[frozenset[str] | None] = None
    multiple: ClassVar[bool] = False

    def parse(self, text: str) -> Any:
        """Parse the raw text of a single annotation occurrence.

        Args:
            text (str): Raw annotation text following the tag.

        Returns:
            Any: The structured value attached to the item.
        """
        raise NotImplementedError

    def is_allowed_on(self, item_type: str | None) -> bool:
        """Return True if this annotation may be attached to ``item_type``."""
        return self.allowed_on is None or item_type in self.allowed_on

    def meta(self) -> AnnotationMeta:
        """Return the serializable descriptor for this annotation."""
        return AnnotationMeta(name=self.name, allowed_on=self.allowed_on, multiple=self.multiple)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
