"""Metadata model of a page."""

from .attributes import AttributeList, HtmlAttributeList
from .base import Base
from .elements import add_link, add_meta, auto_hid, auto_hid_all
from .link import Link
from .meta import Meta
from .metadata import MetaData, VueMetaData
from .noscript import NoScript
from .open_graph import OpenGraphImage, OpenGraphProperties
from .script import Script
from .twitter import TwitterSummaryCard, TwitterSummaryLargeImageCard

__all__ = [
    "AttributeList",
    "Base",
    "HtmlAttributeList",
    "Link",
    "Meta",
    "MetaData",
    "NoScript",
    "OpenGraphImage",
    "OpenGraphProperties",
    "Script",
    "TwitterSummaryCard",
    "TwitterSummaryLargeImageCard",
    "VueMetaData",
    "add_link",
    "add_meta",
    "auto_hid",
    "auto_hid_all",
]
