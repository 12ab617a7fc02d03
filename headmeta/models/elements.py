"""Append and identity helpers for element collections."""

from __future__ import annotations

from typing import Callable, TypeVar

from ..hid import hid as make_hid
from ..utils import first_with_value, has_value
from .link import Link
from .meta import Meta
from .types import LinkList, MetaList

_E = TypeVar("_E", Meta, Link)


def _meta_key(meta: Meta) -> str | None:
    """Return the semantic key of a ``<meta>`` element."""

    return first_with_value(meta.name, meta.property, meta.http_equiv)


def _link_key(link: Link) -> str | None:
    """Return the semantic key of a ``<link>`` element."""

    return first_with_value(link.rel)


# Semantic key extractors keyed by element tag.
_SEMANTIC_KEYS: dict[str, Callable[..., str | None]] = {
    Meta.tag: _meta_key,
    Link.tag: _link_key,
}


def semantic_key(element: Meta | Link) -> str | None:
    """Return the value identifying the logical slot of ``element``.

    Args:
        element: ``Meta`` or ``Link`` element.

    Returns:
        The first non-blank of ``name``, ``property`` and ``http_equiv`` for
        meta elements, or ``rel`` for links. ``None`` when all are blank.
    """

    return _SEMANTIC_KEYS[element.tag](element)


def auto_hid(element: _E, hashed: bool = True) -> _E:
    """Assign a ``hid`` to ``element`` based on its semantic key.

    Elements without a semantic key are returned unchanged.

    Args:
        element: ``Meta`` or ``Link`` element to update in place.
        hashed: Hash the key with ``hid``; otherwise use the raw key.

    Returns:
        The same element, for chaining.
    """

    key = semantic_key(element)
    if not has_value(key):
        return element
    element.hid = make_hid(key) if hashed else key
    return element


def auto_hid_all(items: list[_E], hashed: bool = True) -> list[_E]:
    """Assign a ``hid`` to every element of ``items``."""

    for item in items:
        auto_hid(item, hashed)
    return items


def add_meta(
    items: MetaList,
    name: str | None = None,
    content: str | None = None,
    hid: str | None = None,
    id: str | None = None,
    charset: str | None = None,
    property: str | None = None,
    http_equiv: str | None = None,
    auto_hid: bool = True,
    mandatory: bool = False,
) -> MetaList:
    """Append a ``<meta>`` element to ``items``.

    Args:
        items: Collection the element is appended to.
        name: Value of the ``name`` attribute.
        content: Value of the ``content`` attribute.
        hid: Identity key, used verbatim when given.
        id: Value of the ``id`` attribute.
        charset: Value of the ``charset`` attribute.
        property: Value of the ``property`` attribute.
        http_equiv: Value of the ``http-equiv`` attribute.
        auto_hid: Derive ``hid`` from the first non-blank of ``name``,
            ``property`` and ``http_equiv`` when ``hid`` is not given.
        mandatory: Append the element even when ``content`` is blank. A
            missing value stays ``None`` and is left out when serialized.

    Returns:
        ``items``, for chaining.
    """

    if not mandatory and not has_value(content):
        return items

    if hid is None and auto_hid:
        hid = make_hid(first_with_value(name, property, http_equiv))

    items.append(
        Meta(
            hid=hid,
            id=id,
            charset=charset,
            http_equiv=http_equiv,
            name=name,
            property=property,
            content=content,
        )
    )
    return items


def add_link(
    items: LinkList,
    rel: str | None = None,
    href: str | None = None,
    hid: str | None = None,
    id: str | None = None,
    type: str | None = None,
    media: str | None = None,
    sizes: str | None = None,
    auto_hid: bool = True,
    mandatory: bool = False,
) -> LinkList:
    """Append a ``<link>`` element to ``items``.

    Args:
        items: Collection the element is appended to.
        rel: Value of the ``rel`` attribute.
        href: Value of the ``href`` attribute.
        hid: Identity key, used verbatim when given.
        id: Value of the ``id`` attribute.
        type: Value of the ``type`` attribute.
        media: Value of the ``media`` attribute.
        sizes: Value of the ``sizes`` attribute.
        auto_hid: Derive ``hid`` from ``rel`` when ``hid`` is not given.
        mandatory: Append the element even when ``href`` is blank. A
            missing value stays ``None`` and is left out when serialized.

    Returns:
        ``items``, for chaining.
    """

    if not mandatory and not has_value(href):
        return items

    if hid is None and auto_hid:
        hid = make_hid(first_with_value(rel))

    items.append(
        Link(
            hid=hid,
            id=id,
            rel=rel,
            href=href,
            type=type,
            media=media,
            sizes=sizes,
        )
    )
    return items
