"""Shared fixtures for the metadata tests."""

from __future__ import annotations

from typing import Any

import pytest

from headmeta.models import (
    OpenGraphProperties,
    TwitterSummaryCard,
    VueMetaData,
)


@pytest.fixture
def page_data() -> dict[str, Any]:
    """Return a page description using most supported keys."""
    return {
        "title": "Home | Example",
        "canonical_url": "https://example.com/",
        "meta_description": "Welcome",
        "robots": "index,follow",
        "language": "en-US",
        "base": {"href": "https://example.com/", "target": "_blank"},
        "links": [{"rel": "icon", "href": "/favicon.ico", "sizes": "32x32"}],
        "meta": [{"charset": "utf-8"}, {"http-equiv": "refresh"}],
        "scripts": [
            {"src": "/app.js", "defer": True},
            {"type": "application/ld+json", "json": {"@type": "WebSite"}},
        ],
        "noscripts": [{"innerHTML": "<p>Enable JavaScript</p>"}],
        "open_graph": {
            "title": "Home",
            "images": [
                "https://example.com/a.png",
                {"url": "https://example.com/b.png", "width": 1200},
            ],
        },
        "twitter_card": {"card": "summary_large_image", "site": "@example"},
        "body_attributes": {"class": "home"},
        "dangerously_disable_sanitizers": ["script"],
    }


@pytest.fixture
def metadata() -> VueMetaData:
    """Return metadata populated through the chaining helpers."""
    open_graph = OpenGraphProperties(title="Home", site_name="Example")
    open_graph.append_image("https://example.com/a.png", 1200, 630)

    return (
        VueMetaData()
        .set_language("da-DK")
        .set_title("Home | Example")
        .set_canonical_url("https://example.com/")
        .set_meta_description("Welcome")
        .set_robots("index,follow")
        .add_link(rel="icon", href="/favicon.ico")
        .add_meta(charset="utf-8")
        .add_script(source="/app.js", async_=True)
        .add_noscript(inner_html="<p>Enable JavaScript</p>")
        .set_open_graph(open_graph)
        .set_twitter_card(TwitterSummaryCard(site="@example"))
    )
