"""Represents the ``<base>`` element of a page."""

from __future__ import annotations

from attrs import define


@define(slots=True, kw_only=True)
class Base:
    """Represents the ``<base>`` element of a page.

    Attributes:
        href: Base URL for relative URLs in the document.
        target: Default browsing context for links, e.g. ``_blank``.
    """

    href: str | None = None
    target: str | None = None
