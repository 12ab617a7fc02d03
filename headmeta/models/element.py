"""Attributes shared by all head and body elements."""

from __future__ import annotations

from typing import ClassVar

from attrs import define


@define(slots=True, kw_only=True)
class Element:
    """Attributes shared by all head and body elements.

    Serialized before the attributes of the concrete element.

    Attributes:
        tag: Name of the HTML element, used to dispatch per element kind.
        hid: Identity key letting the consumer replace the element across
            renders instead of appending a duplicate. Unrelated to ``id``.
        id: Value of the HTML ``id`` attribute.
    """

    tag: ClassVar[str] = ""

    hid: str | None = None
    id: str | None = None
