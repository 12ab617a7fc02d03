"""Metadata of a single page."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from attrs import define, field

from .attributes import AttributeList, HtmlAttributeList
from .base import Base
from .link import Link
from .meta import Meta
from .noscript import NoScript
from .open_graph import OpenGraphProperties
from .script import Script
from .twitter import TwitterSummaryCard
from .types import (
    JSONDict,
    LinkList,
    MetaList,
    NoScriptList,
    ScriptList,
    StringList,
    TwitterCard,
)

_M = TypeVar("_M", bound="MetaData")
_C = TypeVar("_C", bound=TwitterSummaryCard)


def _require(value: Any, name: str) -> None:  # noqa: ANN401
    """Reject a missing argument."""

    if value is None:
        raise ValueError(f"{name} must not be None")


@define(slots=True)
class MetaData:
    """Metadata of a single page.

    Built once per render, filled in by page setup code and handed to the
    serializer. The setters and ``add_*`` helpers return the instance so
    calls can be chained.

    Attributes:
        title: Value of the ``<title>`` element.
        canonical_url: Canonical URL of the page.
        meta_title: Meta title of the page, distinct from ``title``.
        meta_description: Meta description of the page.
        robots: Value of the ``robots`` meta element, e.g. ``index,follow``.
        base: The ``<base>`` element, if any.
        links: Ordered ``<link>`` elements.
        meta: Ordered ``<meta>`` elements.
        scripts: Ordered ``<script>`` elements.
        noscripts: Ordered ``<noscript>`` elements.
        open_graph: Open Graph properties of the page.
        twitter_card: Twitter card of the page.
    """

    title: str | None = None
    canonical_url: str | None = None
    meta_title: str | None = None
    meta_description: str | None = None
    robots: str | None = None
    base: Base | None = None
    links: LinkList = field(factory=list)
    meta: MetaList = field(factory=list)
    scripts: ScriptList = field(factory=list)
    noscripts: NoScriptList = field(factory=list)
    open_graph: OpenGraphProperties | None = None
    twitter_card: TwitterCard | None = None

    # Basics

    def set_title(self: _M, value: str | None) -> _M:
        self.title = value
        return self

    def set_canonical_url(self: _M, value: str | None) -> _M:
        self.canonical_url = value
        return self

    def set_meta_title(self: _M, value: str | None) -> _M:
        self.meta_title = value
        return self

    def set_meta_description(self: _M, value: str | None) -> _M:
        self.meta_description = value
        return self

    def set_robots(self: _M, value: str | None) -> _M:
        self.robots = value
        return self

    def set_base(self: _M, value: Base | None) -> _M:
        self.base = value
        return self

    # Links

    def add_link(
        self: _M,
        rel: str | None = None,
        href: str | None = None,
        hid: str | None = None,
        id: str | None = None,
        type: str | None = None,
        media: str | None = None,
        sizes: str | None = None,
    ) -> _M:
        """Append a ``<link>`` element built from the given attributes."""

        link = Link(
            hid=hid,
            id=id,
            rel=rel,
            href=href,
            type=type,
            media=media,
            sizes=sizes,
        )
        return self.append_link(link)

    def append_link(self: _M, link: Link) -> _M:
        _require(link, "link")
        self.links.append(link)
        return self

    def configure_link(self: _M, action: Callable[[Link], None]) -> _M:
        """Append a new ``<link>`` element after ``action`` has set it up.

        Args:
            action: Callable receiving the new element.

        Returns:
            The metadata instance.

        Throws:
            ValueError: If ``action`` is ``None``.
        """

        _require(action, "action")
        link = Link()
        action(link)
        return self.append_link(link)

    # Meta

    def add_meta(
        self: _M,
        name: str | None = None,
        content: str | None = None,
        hid: str | None = None,
        id: str | None = None,
        charset: str | None = None,
        property: str | None = None,
        http_equiv: str | None = None,
    ) -> _M:
        """Append a ``<meta>`` element built from the given attributes.

        Unlike the collection helper in ``elements``, the element is kept
        even when ``content`` is blank and no ``hid`` is derived.
        """

        meta = Meta(
            hid=hid,
            id=id,
            charset=charset,
            http_equiv=http_equiv,
            name=name,
            property=property,
            content=content,
        )
        return self.append_meta(meta)

    def append_meta(self: _M, meta: Meta) -> _M:
        _require(meta, "meta")
        self.meta.append(meta)
        return self

    def configure_meta(self: _M, action: Callable[[Meta], None]) -> _M:
        _require(action, "action")
        meta = Meta()
        action(meta)
        return self.append_meta(meta)

    # Scripts

    def add_script(
        self: _M,
        source: str | None = None,
        hid: str | None = None,
        id: str | None = None,
        title: str | None = None,
        type: str | None = None,
        inner_html: str | None = None,
        append_to_body: bool = False,
        defer: bool = False,
        async_: bool = False,
        json: Any = None,  # noqa: ANN401
    ) -> _M:
        """Append a ``<script>`` element built from the given attributes.

        A missing ``type`` falls back to ``text/javascript``.
        """

        script = Script(
            hid=hid,
            id=id,
            title=title,
            source=source,
            inner_html=inner_html,
            append_to_body=append_to_body,
            defer=defer,
            async_=async_,
            json=json,
        )
        if type is not None:
            script.type = type
        return self.append_script(script)

    def append_script(self: _M, script: Script) -> _M:
        _require(script, "script")
        self.scripts.append(script)
        return self

    def configure_script(self: _M, action: Callable[[Script], None]) -> _M:
        _require(action, "action")
        script = Script()
        action(script)
        return self.append_script(script)

    # Noscripts

    def add_noscript(
        self: _M,
        inner_html: str | None = None,
        hid: str | None = None,
        id: str | None = None,
    ) -> _M:
        noscript = NoScript(hid=hid, id=id, inner_html=inner_html)
        return self.append_noscript(noscript)

    def append_noscript(self: _M, noscript: NoScript) -> _M:
        _require(noscript, "noscript")
        self.noscripts.append(noscript)
        return self

    def configure_noscript(
        self: _M, action: Callable[[NoScript], None]
    ) -> _M:
        _require(action, "action")
        noscript = NoScript()
        action(noscript)
        return self.append_noscript(noscript)

    # Open Graph and Twitter

    def set_open_graph(self: _M, value: OpenGraphProperties | None) -> _M:
        self.open_graph = value
        return self

    def configure_open_graph(
        self: _M, action: Callable[[OpenGraphProperties], None]
    ) -> _M:
        """Replace the Open Graph properties with new ones set up by
        ``action``.

        Throws:
            ValueError: If ``action`` is ``None``.
        """

        _require(action, "action")
        open_graph = OpenGraphProperties()
        action(open_graph)
        return self.set_open_graph(open_graph)

    def set_twitter_card(self: _M, card: TwitterCard | None) -> _M:
        self.twitter_card = card
        return self

    def configure_twitter_card(
        self: _M,
        card_type: type[_C],
        action: Callable[[_C], None],
    ) -> _M:
        """Replace the Twitter card with a new ``card_type`` instance set up
        by ``action``.

        Args:
            card_type: Class of the card to create.
            action: Callable receiving the new card.

        Returns:
            The metadata instance.

        Throws:
            ValueError: If ``card_type`` or ``action`` is ``None``.
        """

        _require(card_type, "card_type")
        _require(action, "action")
        card = card_type()
        action(card)
        return self.set_twitter_card(card)

    def to_vue_meta_json(self) -> JSONDict:
        """Return the Vue Meta document describing this page."""

        from ..serializer import to_vue_meta_json

        return to_vue_meta_json(self)


@define(slots=True, init=False)
class VueMetaData(MetaData):
    """Page metadata including the parts specific to Vue Meta.

    Besides the attributes below, the constructor accepts a keyword-only
    ``language`` that sets the ``lang`` attribute of the ``html`` element.

    Attributes:
        html_attributes: Attributes of the ``html`` element.
        head_attributes: Attributes of the ``head`` element.
        body_attributes: Attributes of the ``body`` element.
        dangerously_disable_sanitizers: Properties the consumer must not
            escape when injecting them into the page.
    """

    html_attributes: HtmlAttributeList = field(factory=HtmlAttributeList)
    head_attributes: AttributeList = field(factory=AttributeList)
    body_attributes: AttributeList = field(factory=AttributeList)
    dangerously_disable_sanitizers: StringList = field(factory=list)

    def __init__(
        self,
        *args: Any,  # noqa: ANN401
        language: str | None = None,
        **kwargs: Any,  # noqa: ANN401
    ) -> None:
        self.__attrs_init__(*args, **kwargs)  # type: ignore[attr-defined]
        if language is not None:
            self.html_attributes.language = language

    def set_language(self, value: str | None) -> VueMetaData:
        """Set the ``lang`` attribute of the ``html`` element."""

        self.html_attributes.language = value
        return self

    def disable_sanitizer(self, name: str) -> VueMetaData:
        """Mark the ``name`` property as not to be escaped."""

        _require(name, "name")
        self.dangerously_disable_sanitizers.append(name)
        return self
