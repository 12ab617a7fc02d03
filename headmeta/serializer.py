"""Serialize page metadata into a Vue Meta document."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable

from attrs import fields

from .json_utils import json_dumps
from .models import twitter
from .models.elements import add_link, add_meta
from .models.metadata import MetaData
from .models.types import JSONDict

logger = logging.getLogger(__name__)

# Callable adding extra sections, such as ``style``, to the document.
Extension = Callable[[MetaData, JSONDict], None]

# Top-level keys of the attribute sections and the fields they come from.
_ATTRIBUTE_SECTIONS = (
    ("htmlAttrs", "html_attributes"),
    ("headAttrs", "head_attributes"),
    ("bodyAttrs", "body_attributes"),
)


def element_to_json(element: Any) -> JSONDict:  # noqa: ANN401
    """Return the JSON object describing an element.

    Attributes are emitted in declaration order, shared element attributes
    first. ``None`` values are skipped unless the field is marked
    ``keep_none``, and fields marked ``omit_default`` are skipped while
    equal to their default.

    Args:
        element: Element, or other attrs based model such as ``Base``.

    Returns:
        Dictionary keyed by the JSON attribute names.
    """

    data: JSONDict = {}
    for attribute in fields(type(element)):
        value = getattr(element, attribute.name)
        options = attribute.metadata

        if value is None and not options.get("keep_none", False):
            continue
        if options.get("omit_default", False) and value == attribute.default:
            continue

        data[options.get("json", attribute.name)] = value
    return data


def to_vue_meta_json(
    metadata: MetaData, extensions: Iterable[Extension] = ()
) -> JSONDict:
    """Return the Vue Meta document describing ``metadata``.

    The canonical link, the description and robots meta elements, and the
    Open Graph and Twitter card elements are appended after the elements
    added by the caller. Empty sections are left out. The caller's
    collections are not modified.

    Args:
        metadata: Populated page metadata.
        extensions: Callables adding further sections to the document
            before the sanitizer list is written.

    Returns:
        Dictionary ready for JSON encoding.

    Throws:
        ValueError: If ``metadata`` is ``None``.
    """

    if metadata is None:
        raise ValueError("metadata must not be None")

    doc: JSONDict = {"title": metadata.title or ""}

    # Attributes of the root elements, present on Vue specific metadata.
    for key, name in _ATTRIBUTE_SECTIONS:
        attributes = getattr(metadata, name, None)
        if attributes:
            doc[key] = dict(attributes)

    if metadata.base is not None:
        doc["base"] = element_to_json(metadata.base)

    links = list(metadata.links)
    meta = list(metadata.meta)
    scripts = list(metadata.scripts)
    noscripts = list(metadata.noscripts)

    add_link(
        links,
        rel="canonical",
        hid="canonical",
        href=metadata.canonical_url,
        mandatory=True,
    )
    add_meta(
        meta,
        name="description",
        hid="description",
        content=metadata.meta_description or "",
        mandatory=True,
    )
    add_meta(meta, name="robots", hid="robots", content=metadata.robots)

    if metadata.open_graph is not None:
        meta.extend(metadata.open_graph.get_meta_tags())
    if metadata.twitter_card is not None:
        meta.extend(twitter.get_meta_tags(metadata.twitter_card))

    for key, items in (
        ("link", links),
        ("meta", meta),
        ("script", scripts),
        ("noscript", noscripts),
    ):
        if items:
            doc[key] = [element_to_json(item) for item in items]

    # TODO: support the "style" and "__dangerouslyDisableSanitizersByTagID"
    # sections; until then they can be added through ``extensions``.
    for extension in extensions:
        extension(metadata, doc)

    sanitizers = getattr(metadata, "dangerously_disable_sanitizers", None)
    if sanitizers:
        doc["__dangerouslyDisableSanitizers"] = list(sanitizers)

    logger.debug(
        f"Serialized metadata: {len(links)} links, {len(meta)} meta, "
        f"{len(scripts)} scripts, {len(noscripts)} noscripts"
    )
    return doc


def dumps(metadata: MetaData, indent: bool = False) -> str:
    """Return the Vue Meta document of ``metadata`` as JSON text.

    Args:
        metadata: Populated page metadata.
        indent: Pretty-print the output.

    Returns:
        JSON text. Equal metadata always yields equal text.
    """

    return json_dumps(to_vue_meta_json(metadata), indent=indent)
