"""Build page metadata from JSON or YAML page descriptions."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from attrs import fields

from headmeta.json_utils import json_loads
from headmeta.models import (
    Base,
    Link,
    Meta,
    NoScript,
    OpenGraphImage,
    OpenGraphProperties,
    Script,
    VueMetaData,
)
from headmeta.models.twitter import CARD_TYPES

logger = logging.getLogger(__name__)

JSONDict = dict[str, Any]

# Scalar fields copied verbatim onto the metadata.
_SCALAR_KEYS = (
    "title",
    "canonical_url",
    "meta_title",
    "meta_description",
    "robots",
)


def _model_kwargs(cls: type, data: Mapping[str, Any]) -> JSONDict:
    """Map ``data`` onto keyword arguments of the attrs class ``cls``.

    Both attribute names (``inner_html``) and their JSON names
    (``innerHTML``) are accepted.

    Throws:
        ValueError: If ``data`` is not a mapping or has unknown keys.
    """

    if not isinstance(data, Mapping):
        raise ValueError(f"Expected a mapping for {cls.__name__}")

    names: dict[str, str] = {}
    for attribute in fields(cls):
        names[attribute.name] = attribute.name
        names[attribute.metadata.get("json", attribute.name)] = attribute.name

    kwargs: JSONDict = {}
    for key, value in data.items():
        if key not in names:
            raise ValueError(f"Unknown {cls.__name__} attribute: {key}")
        kwargs[names[key]] = value
    return kwargs


def _open_graph_from_dict(data: Mapping[str, Any]) -> OpenGraphProperties:
    """Build Open Graph properties, accepting images as URLs or mappings."""

    values = dict(data)
    images = values.pop("images", None) or []
    open_graph = OpenGraphProperties(
        **_model_kwargs(OpenGraphProperties, values)
    )

    for image in images:
        if isinstance(image, str):
            open_graph.images.append(OpenGraphImage(image))
        else:
            open_graph.images.append(
                OpenGraphImage(**_model_kwargs(OpenGraphImage, image))
            )
    return open_graph


def _twitter_card_from_dict(data: Mapping[str, Any]) -> Any:  # noqa: ANN401
    """Build a Twitter card from its ``card`` discriminator and fields."""

    values = dict(data)
    card = values.pop("card", "summary")
    card_type = CARD_TYPES.get(card)
    if card_type is None:
        raise ValueError(f"Unsupported Twitter card type: {card}")
    return card_type(**_model_kwargs(card_type, values))


def metadata_from_dict(data: Mapping[str, Any]) -> VueMetaData:
    """Build page metadata from a plain page description.

    Args:
        data: Mapping using the attribute names of ``VueMetaData`` plus an
            optional ``language`` for the ``html`` element.

    Returns:
        The populated metadata.

    Throws:
        ValueError: If the description is malformed.
    """

    if not isinstance(data, Mapping):
        raise ValueError("A page description must be a mapping")

    metadata = VueMetaData(
        language=data.get("language") or None,
        **{key: data.get(key) for key in _SCALAR_KEYS},
    )

    if data.get("base"):
        metadata.set_base(Base(**_model_kwargs(Base, data["base"])))

    # Elements keep the order given in the description.
    for item in data.get("links") or []:
        metadata.append_link(Link(**_model_kwargs(Link, item)))
    for item in data.get("meta") or []:
        metadata.append_meta(Meta(**_model_kwargs(Meta, item)))
    for item in data.get("scripts") or []:
        metadata.append_script(Script(**_model_kwargs(Script, item)))
    for item in data.get("noscripts") or []:
        metadata.append_noscript(NoScript(**_model_kwargs(NoScript, item)))

    if data.get("open_graph"):
        metadata.set_open_graph(_open_graph_from_dict(data["open_graph"]))
    if data.get("twitter_card"):
        metadata.set_twitter_card(
            _twitter_card_from_dict(data["twitter_card"])
        )

    metadata.html_attributes.update(data.get("html_attributes") or {})
    metadata.head_attributes.update(data.get("head_attributes") or {})
    metadata.body_attributes.update(data.get("body_attributes") or {})
    metadata.dangerously_disable_sanitizers.extend(
        data.get("dangerously_disable_sanitizers") or []
    )
    return metadata


def _load_page_data(path: Path) -> object:
    """Read a JSON or YAML page description from ``path``."""

    text = path.read_text(encoding="utf-8")

    # Decode JSON or YAML depending on file extension.
    if path.suffix == ".json":
        return json_loads(text)
    return yaml.safe_load(text)


def load_page_file(path: Path) -> VueMetaData:
    """Return the page metadata described by the file at ``path``.

    Args:
        path: Location of the JSON or YAML page description.

    Returns:
        The populated metadata.
    """

    logger.debug(f"Loading page description from {path}")
    return metadata_from_dict(_load_page_data(path))  # type: ignore[arg-type]
