"""Represents a ``<link>`` element."""

from __future__ import annotations

from typing import ClassVar

from attrs import define

from .element import Element


@define(slots=True, kw_only=True)
class Link(Element):
    """Represents a ``<link>`` element.

    Attributes:
        rel: Relationship of the linked resource, e.g. ``canonical``.
        href: URL of the linked resource.
        type: MIME type of the linked resource.
        media: Media query the resource applies to.
        sizes: Icon sizes, e.g. ``32x32``.
    """

    tag: ClassVar[str] = "link"

    rel: str | None = None
    href: str | None = None
    type: str | None = None
    media: str | None = None
    sizes: str | None = None
