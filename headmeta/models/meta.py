"""Represents a ``<meta>`` element."""

from __future__ import annotations

from typing import ClassVar

from attrs import define, field

from .element import Element


@define(slots=True, kw_only=True)
class Meta(Element):
    """Represents a ``<meta>`` element.

    Only one of ``name`` and ``property`` is meaningful for a real element,
    but both are carried as given.

    Attributes:
        charset: Character encoding of the document.
        http_equiv: Pragma directive, serialized as ``http-equiv``.
        name: Name of a name-value pair.
        property: Property of a property-value pair, e.g. ``og:title``.
        content: Value of the pair.
    """

    tag: ClassVar[str] = "meta"

    charset: str | None = None
    http_equiv: str | None = field(
        default=None, metadata={"json": "http-equiv"}
    )
    name: str | None = None
    property: str | None = None
    content: str | None = None
