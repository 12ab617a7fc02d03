"""Represents a ``<script>`` element."""

from __future__ import annotations

from typing import Any, ClassVar

from attrs import define, field

from .element import Element

DEFAULT_SCRIPT_TYPE = "text/javascript"


@define(slots=True, kw_only=True)
class Script(Element):
    """Represents a ``<script>`` element.

    Attributes:
        title: Title passed on to integrations that read it.
        source: Script URL, serialized as ``src``.
        type: MIME type, always serialized.
        inner_html: Inline script body, serialized as ``innerHTML``.
        append_to_body: Render the element in ``<body>``, serialized as
            ``body``.
        defer: Execute after the document has been parsed.
        async_: Execute as soon as the script is available, serialized as
            ``async``.
        json: JSON payload rendered inside the element, e.g. JSON-LD.
    """

    tag: ClassVar[str] = "script"

    title: str | None = None
    source: str | None = field(default=None, metadata={"json": "src"})
    type: str | None = field(
        default=DEFAULT_SCRIPT_TYPE, metadata={"keep_none": True}
    )
    inner_html: str | None = field(
        default=None, metadata={"json": "innerHTML"}
    )
    append_to_body: bool = field(
        default=False, metadata={"json": "body", "omit_default": True}
    )
    defer: bool = field(default=False, metadata={"omit_default": True})
    async_: bool = field(
        default=False, metadata={"json": "async", "omit_default": True}
    )
    json: Any = None
