"""Twitter cards and the ``<meta>`` elements describing them."""

from __future__ import annotations

from typing import Callable, ClassVar

from attrs import define

from ..utils import has_value
from .elements import add_meta
from .types import MetaList, TwitterCard


@define(slots=True)
class TwitterSummaryCard:
    """A ``summary`` Twitter card.

    Attributes:
        card: Type of the card.
        site: Username of the account representing the site.
        creator: Username of the account the content is attributed to.
        title: Title of the content.
        description: Short summary of the content.
        image: URL of an image representing the content.
        image_text: Alternative text of the image.
    """

    card: ClassVar[str] = "summary"

    site: str | None = None
    creator: str | None = None
    title: str | None = None
    description: str | None = None
    image: str | None = None
    image_text: str | None = None


@define(slots=True)
class TwitterSummaryLargeImageCard(TwitterSummaryCard):
    """A ``summary_large_image`` Twitter card, featuring a large image."""

    card: ClassVar[str] = "summary_large_image"


def _summary_meta_tags(card: TwitterSummaryCard) -> MetaList:
    """Return the ``<meta>`` elements of a summary card."""

    tags: MetaList = []

    # The card type and site are always present.
    add_meta(tags, name="twitter:card", content=card.card, mandatory=True)
    add_meta(tags, name="twitter:site", content=card.site, mandatory=True)

    if has_value(card.creator):
        add_meta(tags, name="twitter:creator", content=card.creator)
    if has_value(card.title):
        add_meta(tags, name="twitter:title", content=card.title)
    if has_value(card.description):
        add_meta(tags, name="twitter:description", content=card.description)
    if has_value(card.image):
        add_meta(tags, name="twitter:image", content=card.image)
    if has_value(card.image_text):
        add_meta(tags, name="twitter:image:alt", content=card.image_text)

    return tags


# Card classes and meta builders keyed by the ``card`` discriminator.
CARD_TYPES: dict[str, type[TwitterSummaryCard]] = {
    TwitterSummaryCard.card: TwitterSummaryCard,
    TwitterSummaryLargeImageCard.card: TwitterSummaryLargeImageCard,
}
_BUILDERS: dict[str, Callable[..., MetaList]] = {
    TwitterSummaryCard.card: _summary_meta_tags,
    TwitterSummaryLargeImageCard.card: _summary_meta_tags,
}


def get_meta_tags(card: TwitterCard) -> MetaList:
    """Return the ``<meta>`` elements describing ``card``.

    Args:
        card: Twitter card of any supported type.

    Returns:
        Ordered ``<meta>`` elements with ``hid`` values derived from their
        names.

    Throws:
        ValueError: If the card type is not supported.
    """

    builder = _BUILDERS.get(card.card)
    if builder is None:
        raise ValueError(f"Unsupported Twitter card type: {card.card}")
    return builder(card)
