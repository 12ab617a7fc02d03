"""Tests for the page metadata helpers."""

import pytest

from headmeta.models import (
    Base,
    Link,
    Meta,
    MetaData,
    NoScript,
    OpenGraphProperties,
    Script,
    TwitterSummaryLargeImageCard,
    VueMetaData,
)


def test_setters_chain() -> None:
    """Setters return the instance and store the value."""

    metadata = MetaData()
    result = (
        metadata.set_title("T")
        .set_canonical_url("https://example.com/")
        .set_meta_title("MT")
        .set_meta_description("D")
        .set_robots("noindex")
        .set_base(Base(href="/"))
    )

    assert result is metadata
    assert metadata.title == "T"
    assert metadata.canonical_url == "https://example.com/"
    assert metadata.meta_title == "MT"
    assert metadata.meta_description == "D"
    assert metadata.robots == "noindex"
    assert metadata.base == Base(href="/")


def test_add_helpers_keep_order() -> None:
    """Elements are appended in call order without derived hids."""

    metadata = (
        MetaData()
        .add_meta(name="author", content="")
        .add_meta(charset="utf-8")
        .add_link(rel="icon", href="/favicon.ico", sizes="32x32")
        .add_link(rel="manifest", href="/site.webmanifest")
    )

    assert metadata.meta == [
        Meta(name="author", content=""),
        Meta(charset="utf-8"),
    ]
    assert [link.rel for link in metadata.links] == ["icon", "manifest"]
    assert metadata.links[0].hid is None


def test_add_script_default_type() -> None:
    """Scripts fall back to ``text/javascript``."""

    metadata = (
        MetaData()
        .add_script(source="/a.js", defer=True)
        .add_script(type="application/ld+json", json={"a": 1})
    )

    assert metadata.scripts[0].type == "text/javascript"
    assert metadata.scripts[0].defer is True
    assert metadata.scripts[1].type == "application/ld+json"


def test_add_noscript() -> None:
    """Noscript elements keep their attributes."""

    metadata = MetaData().add_noscript("<p>x</p>", hid="n", id="ns")
    assert metadata.noscripts == [
        NoScript(hid="n", id="ns", inner_html="<p>x</p>")
    ]


@pytest.mark.parametrize(
    "method",
    ["append_link", "append_meta", "append_script", "append_noscript"],
)
def test_append_rejects_none(method: str) -> None:
    """Appending a missing element is an error."""

    with pytest.raises(ValueError):
        getattr(MetaData(), method)(None)


@pytest.mark.parametrize(
    "method",
    [
        "configure_link",
        "configure_meta",
        "configure_script",
        "configure_noscript",
        "configure_open_graph",
    ],
)
def test_configure_rejects_missing_action(method: str) -> None:
    """Configuring without a callable is an error."""

    with pytest.raises(ValueError):
        getattr(MetaData(), method)(None)


def test_configure_elements() -> None:
    """Configured elements are created, set up and appended."""

    def setup_link(link: Link) -> None:
        link.rel = "preconnect"
        link.href = "https://cdn.example.com"

    def setup_script(script: Script) -> None:
        script.source = "/a.js"

    metadata = (
        MetaData()
        .configure_link(setup_link)
        .configure_meta(lambda meta: setattr(meta, "name", "x"))
        .configure_script(setup_script)
        .configure_noscript(lambda ns: setattr(ns, "inner_html", "y"))
    )

    assert metadata.links == [
        Link(rel="preconnect", href="https://cdn.example.com")
    ]
    assert metadata.meta[0].name == "x"
    assert metadata.scripts == [Script(source="/a.js")]
    assert metadata.noscripts[0].inner_html == "y"


def test_open_graph_helpers() -> None:
    """Open Graph properties can be set or configured."""

    def setup(open_graph: OpenGraphProperties) -> None:
        open_graph.title = "T"
        open_graph.append_image("https://example.com/a.png")

    metadata = MetaData().configure_open_graph(setup)
    assert metadata.open_graph is not None
    assert metadata.open_graph.title == "T"
    assert len(metadata.open_graph.images) == 1

    metadata.set_open_graph(None)
    assert metadata.open_graph is None


def test_twitter_card_helpers() -> None:
    """Twitter cards can be set or configured by type."""

    metadata = MetaData().configure_twitter_card(
        TwitterSummaryLargeImageCard,
        lambda card: setattr(card, "site", "@x"),
    )

    assert isinstance(metadata.twitter_card, TwitterSummaryLargeImageCard)
    assert metadata.twitter_card.site == "@x"

    with pytest.raises(ValueError):
        metadata.configure_twitter_card(TwitterSummaryLargeImageCard, None)


def test_vue_metadata_defaults() -> None:
    """Vue metadata starts with empty attribute lists."""

    metadata = VueMetaData()
    assert len(metadata.html_attributes) == 0
    assert len(metadata.head_attributes) == 0
    assert len(metadata.body_attributes) == 0
    assert metadata.dangerously_disable_sanitizers == []


def test_vue_metadata_language_and_sanitizers() -> None:
    """Language and sanitizer helpers chain."""

    metadata = (
        VueMetaData()
        .set_language("da-DK")
        .disable_sanitizer("script")
        .set_title("T")
    )

    assert metadata.html_attributes.language == "da-DK"
    assert metadata.dangerously_disable_sanitizers == ["script"]
    assert metadata.title == "T"

    with pytest.raises(ValueError):
        metadata.disable_sanitizer(None)  # type: ignore[arg-type]


def test_vue_metadata_language_constructor() -> None:
    """The constructor seeds the ``lang`` attribute of ``html``."""

    metadata = VueMetaData(language="da-DK", title="Forside")

    assert metadata.html_attributes.language == "da-DK"
    assert dict(metadata.html_attributes) == {"lang": "da-DK"}
    assert metadata.title == "Forside"
    assert metadata.to_vue_meta_json()["htmlAttrs"] == {"lang": "da-DK"}

    assert VueMetaData(language=None).html_attributes.language is None
    assert VueMetaData(language="en") == VueMetaData().set_language("en")
