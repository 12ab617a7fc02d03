"""Represents a ``<noscript>`` element."""

from __future__ import annotations

from typing import ClassVar

from attrs import define, field

from .element import Element


@define(slots=True, kw_only=True)
class NoScript(Element):
    """Represents a ``<noscript>`` element.

    Attributes:
        inner_html: Markup rendered when scripting is disabled, serialized
            as ``innerHTML``.
    """

    tag: ClassVar[str] = "noscript"

    inner_html: str | None = field(
        default=None, metadata={"json": "innerHTML"}
    )
