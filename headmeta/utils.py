"""Helpers for building head element JSON from plain values."""

from __future__ import annotations

from typing import Any

from .hid import hid as make_hid

JSONDict = dict[str, Any]
JSONList = list[JSONDict]


def has_value(value: str | None) -> bool:
    """Return ``True`` when ``value`` contains non-whitespace text."""

    return value is not None and value.strip() != ""


def first_with_value(*values: str | None) -> str | None:
    """Return the first of ``values`` that contains non-whitespace text."""

    for value in values:
        if has_value(value):
            return value
    return None


def _with_hid(data: JSONDict, hid: str | None, key: str | None) -> JSONDict:
    """Return ``data`` with a ``hid`` entry placed before all other keys.

    Args:
        data: Attributes of the element.
        hid: Explicit identity key, used verbatim when it has a value.
        key: Semantic key hashed into a ``hid`` when ``hid`` is blank. No
            ``hid`` is added when this is ``None`` as well.

    Returns:
        A new dictionary with the ``hid`` first, or ``data`` unchanged.
    """

    if has_value(hid):
        return {"hid": hid, **data}
    if key is not None:
        return {"hid": make_hid(key), **data}
    return data


def add_meta_content(
    items: JSONList,
    name: str,
    content: str | None,
    mandatory: bool = False,
    hid: str | None = None,
    add_hid: bool = False,
) -> None:
    """Append a ``<meta name content>`` element to ``items``.

    Args:
        items: Collection the element is appended to.
        name: Value of the ``name`` attribute.
        content: Value of the ``content`` attribute.
        mandatory: Append the element even when ``content`` is blank.
        hid: Identity key of the element.
        add_hid: Derive a ``hid`` from ``name`` when ``hid`` is blank.

    Throws:
        ValueError: If ``name`` is blank.
    """

    if not has_value(name):
        raise ValueError("A meta element requires a name")
    if not has_value(content) and not mandatory:
        return

    data = {"name": name, "content": content or ""}
    items.append(_with_hid(data, hid, name if add_hid else None))


def add_meta_property(
    items: JSONList,
    property: str | None,
    content: object,
    mandatory: bool = False,
    hid: str | None = None,
    add_hid: bool = False,
) -> None:
    """Append a ``<meta property content>`` element to ``items``.

    Non-string content such as image dimensions is converted with ``str``.
    A blank ``property`` is ignored rather than rejected.

    Args:
        items: Collection the element is appended to.
        property: Value of the ``property`` attribute.
        content: Value of the ``content`` attribute.
        mandatory: Append the element even when ``content`` is blank.
        hid: Identity key of the element.
        add_hid: Derive a ``hid`` from ``property`` when ``hid`` is blank.
    """

    if not has_value(property):
        return

    text = None if content is None else str(content)
    if not has_value(text) and not mandatory:
        return

    data = {"property": property, "content": text or ""}
    items.append(_with_hid(data, hid, property if add_hid else None))


def add_link_json(
    items: JSONList,
    rel: str | None = None,
    href: str | None = None,
    mandatory: bool = False,
) -> None:
    """Append a ``<link rel href>`` element to ``items``.

    Args:
        items: Collection the element is appended to.
        rel: Value of the ``rel`` attribute.
        href: Value of the ``href`` attribute.
        mandatory: Append the element even when ``href`` is blank.
    """

    if not has_value(href) and not mandatory:
        return
    items.append({"rel": rel, "href": href or ""})
